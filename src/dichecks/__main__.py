"""Command line entry point: python -m dichecks PATH."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dichecks import __version__
from dichecks.application.options import parse_option_pairs
from dichecks.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from dichecks.domain.exceptions import DIChecksError
from dichecks.presentation.api import check_sources

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2

_REPORTERS = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "console": ConsoleReporter,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dichecks",
        description="Detect duplicate dependency injections in class hierarchies.",
    )
    parser.add_argument("path", type=Path, help="source directory or .py file")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="directory module names are computed from (default: PATH)",
    )
    parser.add_argument(
        "-O",
        "--option",
        dest="options",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="check option, e.g. dichecks.duplicate_check.fail_on_error=false",
    )
    parser.add_argument(
        "--format",
        choices=sorted(_REPORTERS),
        default="text",
        help="output format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    reporter = _REPORTERS[args.format](sys.stdout)
    try:
        result = check_sources(
            args.path,
            root_path=args.root,
            options=parse_option_pairs(args.options),
            reporter=reporter,
        )
    except DIChecksError as e:
        print(f"dichecks: {e}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_OK if result.passed else EXIT_ISSUES


if __name__ == "__main__":
    sys.exit(main())

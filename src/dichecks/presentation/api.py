"""One-call entry point for checking a Python source tree."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from dichecks.application.options import config_from_options
from dichecks.application.services.processor import DIChecksProcessor
from dichecks.infrastructure.adapters.ast_parser import PythonSourceParser

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult
    from dichecks.domain.model.configuration import DIChecksConfig
    from dichecks.domain.ports.reporter import ReporterProtocol


def check_sources(
    path: Path,
    *,
    root_path: Path | None = None,
    options: Mapping[str, str] | None = None,
    config: DIChecksConfig | None = None,
    reporter: ReporterProtocol | None = None,
) -> CheckResult:
    """Parse a source tree and run every enabled check over it.

    Args:
        path: Directory (or single .py file) to check
        root_path: Directory module names are computed from
            (default: path itself, or its parent for a file)
        options: Compiler-style options applied on top of config
        config: Base configuration (defaults if None)
        reporter: Optional reporter receiving the result

    Returns:
        CheckResult of the pass

    Raises:
        ParsingError: If a source file cannot be parsed
        ConfigurationError: If an option value is invalid
    """
    config = config_from_options(options or {}, config)

    if path.is_file():
        parser = PythonSourceParser(root_path or path.parent)
        parser.parse_file(path)
        model = parser.build()
    else:
        model = PythonSourceParser(root_path or path).parse_directory(path)

    processor = DIChecksProcessor.from_config(model.hierarchy, config, reporter=reporter)
    return processor.process(model.sites)

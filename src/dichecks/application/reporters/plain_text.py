"""Plain text reporter in compiler diagnostic format."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from dichecks.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """One line per issue, then a summary.

    Lines look like `path:line:col: error: message [check-name]` so
    editors and CI log parsers can jump to the field.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text."""
        for issue in result.issues:
            self._write(str(issue))

        self._write(
            f"{result.issue_count} issue(s): {result.error_count} error(s), "
            f"{result.warning_count} warning(s) in {result.stats.sites_analyzed} "
            f"injection site(s) [{result.stats.analysis_time_ms:.0f}ms]"
        )
        self._write(f"Result: {self.status(result)}")

    def _write(self, text: str = "") -> None:
        print(text, file=self._output)

"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from dichecks.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult
    from dichecks.domain.model.issue import DICheckIssue


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON."""
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        return {
            "passed": result.passed,
            "summary": {
                "issue_count": result.issue_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
            },
            "issues": [self._issue_to_dict(i) for i in result.issues],
            "stats": {
                "sites_analyzed": result.stats.sites_analyzed,
                "checks_run": result.stats.checks_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _issue_to_dict(self, issue: DICheckIssue) -> dict[str, object]:
        location: dict[str, object] | None = None
        if issue.location is not None:
            location = {
                "file": str(issue.location.file),
                "line": issue.location.line,
                "column": issue.location.column,
            }
        return {
            "check": issue.check_name,
            "severity": issue.severity.name,
            "message": issue.message,
            "subject": issue.subject,
            "location": location,
        }

"""Reporter protocol for output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    dichecks provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with issues and stats
        """
        ...

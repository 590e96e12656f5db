"""Base reporter class.

Concrete reporters inherit from this and only decide how a result is
laid out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult

PASSED = "PASSED"
FAILED = "FAILED"


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(f"{result.issue_count} issues, {self.status(result)}")
    """

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Write one result.

        Args:
            result: Result of one processing pass
        """

    @staticmethod
    def status(result: CheckResult) -> str:
        """Outcome word, FAILED when any issue is an error."""
        return PASSED if result.passed else FAILED

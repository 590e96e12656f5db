"""Check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from dichecks.domain.model.check_stats import CheckStats
from dichecks.domain.model.enums import Severity
from dichecks.domain.model.issue import DICheckIssue


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of one processing pass.

    The host turns a result that did not pass into a failed build.

    Attributes:
        issues: All issues in check order
        stats: Pass statistics
    """

    issues: tuple[DICheckIssue, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """Check if no ERROR issue was produced."""
        return self.error_count == 0

    @property
    def issue_count(self) -> int:
        """Number of issues."""
        return len(self.issues)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity issues."""
        return sum(1 for i in self.issues if i.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity issues."""
        return sum(1 for i in self.issues if i.severity == Severity.WARNING)

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no issues)."""
        return cls(issues=(), stats=CheckStats.empty())

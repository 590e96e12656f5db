"""Diagnostic issue shared by all checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.enums import Severity
    from dichecks.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class DICheckIssue:
    """Diagnostic produced by a check, ready for a reporter.

    Attributes:
        check_name: Identifier of the check that produced the issue
        severity: ERROR/WARNING/NOTE
        message: Human-readable message
        subject: What the issue is about (usually Class.field)
        location: Source anchor, None if the host supplied none
    """

    check_name: str
    severity: Severity
    message: str
    subject: str
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.check_name:
            raise ValueError("check_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")

    def __str__(self) -> str:
        """Format like a compiler diagnostic."""
        kind = self.severity.name.lower()
        if self.location is None:
            return f"{kind}: {self.message} [{self.check_name}]"
        return f"{self.location}: {kind}: {self.message} [{self.check_name}]"

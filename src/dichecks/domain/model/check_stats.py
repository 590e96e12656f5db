"""Check statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from one processing pass.

    Attributes:
        sites_analyzed: Number of declaration sites handed to the checks
        checks_run: Number of enabled checks executed
        analysis_time_ms: Total time spent in the checks
    """

    sites_analyzed: int
    checks_run: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.sites_analyzed < 0:
            raise ValueError(f"sites_analyzed must be >= 0, got {self.sites_analyzed}")
        if self.checks_run < 0:
            raise ValueError(f"checks_run must be >= 0, got {self.checks_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(sites_analyzed=0, checks_run=0, analysis_time_ms=0.0)

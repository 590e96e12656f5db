"""Main facade for running checks over one compilation round.

DIChecksProcessor is the entry point a host calls once per round with
every injection declaration it discovered.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Self

from dichecks.application.checks import checks_from_config
from dichecks.domain.model.check_result import CheckResult
from dichecks.domain.model.check_stats import CheckStats
from dichecks.domain.model.configuration import DIChecksConfig

if TYPE_CHECKING:
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.issue import DICheckIssue
    from dichecks.domain.ports.check import DICheckProtocol
    from dichecks.domain.ports.reporter import ReporterProtocol
    from dichecks.domain.ports.type_model import TypeModelProtocol

logger = logging.getLogger(__name__)


class DIChecksProcessor:
    """Runs every enabled check over the declaration sites of a round.

    Composition-based: accepts checks and an optional reporter.
    Holds no per-round state, so one processor can serve many rounds
    and independent processors can run concurrently.

    Example:
        model = PythonSourceParser(root).parse_directory(root)
        processor = DIChecksProcessor.from_config(model.hierarchy, DIChecksConfig())
        result = processor.process(model.sites)
        if not result.passed:
            raise SystemExit(1)
    """

    def __init__(
        self,
        checks: Sequence[DICheckProtocol] = (),
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            checks: Checks to run, in order
            reporter: Optional reporter receiving every result
        """
        self._checks = tuple(checks)
        self._reporter = reporter

    @classmethod
    def from_config(
        cls,
        type_model: TypeModelProtocol,
        config: DIChecksConfig | None = None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create processor with checks enabled by config.

        Args:
            type_model: Host type model
            config: Check configuration (defaults if None)
            reporter: Optional reporter

        Returns:
            Processor with config-based checks
        """
        config = config or DIChecksConfig()
        return cls(checks_from_config(config, type_model), reporter=reporter)

    def process(self, sites: Iterable[DeclarationSite]) -> CheckResult:
        """Run all checks over the sites of one round.

        Args:
            sites: Every injection declaration of the round

        Returns:
            CheckResult with issues from all checks and stats
        """
        start_time = time.perf_counter()
        logger.info("starting DI checks")

        sites = tuple(sites)
        issues = self._run_checks(sites)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"DI checks took {elapsed_ms:.0f}ms")

        result = CheckResult(
            issues=issues,
            stats=CheckStats(
                sites_analyzed=len(sites),
                checks_run=len(self._checks),
                analysis_time_ms=elapsed_ms,
            ),
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _run_checks(self, sites: tuple[DeclarationSite, ...]) -> tuple[DICheckIssue, ...]:
        all_issues: list[DICheckIssue] = []

        for check in self._checks:
            issues = check.check(sites)
            logger.debug(f"{check.name}: {len(issues)} issues")
            all_issues.extend(issues)

        return tuple(all_issues)

    @property
    def check_count(self) -> int:
        """Number of configured checks."""
        return len(self._checks)

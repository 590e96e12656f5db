"""Duplicate injection in hierarchy check."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Self

from dichecks.application.checks._base import BaseCheck
from dichecks.application.checks.duplicate.classifier import IdentityClassifier
from dichecks.application.checks.duplicate.detector import DuplicateDetector
from dichecks.application.checks.duplicate.hierarchy_index import HierarchyIndex
from dichecks.application.checks.duplicate.issue import render
from dichecks.application.checks.duplicate.suppression import SuppressionFilter
from dichecks.domain.model.configuration import DUPLICATE_CHECK_NAME

if TYPE_CHECKING:
    from dichecks.domain.model.configuration import DIChecksConfig
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.finding import DuplicateFinding
    from dichecks.domain.model.issue import DICheckIssue
    from dichecks.domain.ports.type_model import TypeModelProtocol

logger = logging.getLogger(__name__)


class DuplicateInjectionInHierarchyCheck(BaseCheck):
    """Detects duplicate injections in a class hierarchy.

    Handles direct, provider and lazy injection: a subclass injecting
    a target its ancestor already injects (under the same qualifier)
    is reported, whatever wrapper either side uses.

    Each check() call builds a fresh HierarchyIndex, so the check can be
    reused across compilation rounds without leaking state.
    """

    def __init__(
        self,
        classifier: IdentityClassifier,
        detector: DuplicateDetector,
        *,
        name: str = DUPLICATE_CHECK_NAME,
    ) -> None:
        """Initialize check.

        Args:
            classifier: Identity classifier
            detector: Duplicate detector
            name: Identifier used in issues and suppression markers
        """
        if not name:
            raise ValueError("name must not be empty")

        self.name = name
        self._classifier = classifier
        self._detector = detector
        self._suppression = SuppressionFilter(name)

    @classmethod
    def from_config(
        cls,
        config: DIChecksConfig,
        type_model: TypeModelProtocol,
    ) -> Self | None:
        """Create check from config. None if the check is disabled."""
        if not config.duplicate_check_enabled:
            return None

        classifier = IdentityClassifier(
            type_model,
            lazy_marker=config.lazy_marker,
            provider_types=sorted(config.provider_types),
        )
        detector = DuplicateDetector(
            type_model.superclass_of,
            fail_on_error=config.duplicate_check_fail_on_error,
        )
        return cls(classifier, detector, name=config.duplicate_check_name)

    def build_index(self, sites: Iterable[DeclarationSite]) -> HierarchyIndex:
        """Populate a fresh index from sites."""
        index = HierarchyIndex(self._classifier, self._suppression)
        index.record_all(sites)
        return index

    def findings(self, sites: Iterable[DeclarationSite]) -> tuple[DuplicateFinding, ...]:
        """Run one pass and return raw findings."""
        index = self.build_index(sites)
        findings = self._detector.detect(index)
        logger.debug(
            f"{self.name}: {index.site_count} sites in {len(index)} identities, "
            f"{len(findings)} duplicates"
        )
        return findings

    def check(self, sites: Iterable[DeclarationSite]) -> tuple[DICheckIssue, ...]:
        """Run one pass and render findings as issues."""
        return tuple(render(finding, self.name) for finding in self.findings(sites))

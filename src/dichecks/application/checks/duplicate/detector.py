"""Duplicate detector: walks ancestor chains inside identity buckets."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dichecks.domain.model.enums import Severity
from dichecks.domain.model.finding import DuplicateFinding

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dichecks.application.checks.duplicate.hierarchy_index import HierarchyIndex
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.injection_identity import InjectionIdentity

SuperclassResolver = Callable[[str], "str | None"]


class DuplicateDetector:
    """Finds sites whose ancestors inject the same identity.

    For every site of a bucket, the enclosing class's ancestor chain is
    walked up to the root. Each ancestor that encloses another site of
    the bucket yields one finding, and the walk keeps going: a class
    duplicating both its parent and its grandparent gets two findings.

    The same chain may be walked once per site and per identity. Real
    hierarchies are shallow and injection counts small, so chain
    prefixes are not memoized.

    An unresolvable ancestor (resolver returns None) ends the walk.
    A class seen twice in one walk also ends it.
    """

    def __init__(
        self,
        superclass_of: SuperclassResolver,
        *,
        fail_on_error: bool = True,
    ) -> None:
        """Initialize detector.

        Args:
            superclass_of: Class name -> superclass name, None at the root
            fail_on_error: Findings are errors (else warnings)
        """
        if superclass_of is None:
            raise TypeError("superclass_of must not be None")

        self._superclass_of = superclass_of
        self._severity = Severity.ERROR if fail_on_error else Severity.WARNING

    @property
    def severity(self) -> Severity:
        """Severity given to every finding."""
        return self._severity

    def detect(self, index: HierarchyIndex) -> tuple[DuplicateFinding, ...]:
        """Find every (site, ancestor) duplicate pair.

        Args:
            index: Populated hierarchy index

        Returns:
            Findings in bucket order, then site order, then walk order
        """
        findings: list[DuplicateFinding] = []

        for identity, sites in index.buckets():
            if len(sites) < 2:
                continue
            enclosing = frozenset(site.enclosing_class for site in sites)
            for site in sites:
                findings.extend(self._detect_site(identity, site, enclosing))

        return tuple(findings)

    def _detect_site(
        self,
        identity: InjectionIdentity,
        site: DeclarationSite,
        enclosing: frozenset[str],
    ) -> Iterator[DuplicateFinding]:
        start = site.enclosing_class
        for ancestor in self._ancestors(start):
            # ancestors never include start, so the match is another site
            if ancestor in enclosing:
                yield DuplicateFinding(
                    site=site,
                    identity=identity,
                    ancestor_class=ancestor,
                    descendant_class=start,
                    severity=self._severity,
                )

    def _ancestors(self, cls: str) -> Iterator[str]:
        """Yield superclasses of cls, nearest first."""
        seen = {cls}
        current = self._superclass_of(cls)
        while current is not None and current not in seen:
            yield current
            seen.add(current)
            current = self._superclass_of(current)

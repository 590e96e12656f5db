"""Hierarchy index: InjectionIdentity -> declaration sites."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.application.checks.duplicate.classifier import IdentityClassifier
    from dichecks.application.checks.duplicate.suppression import SuppressionFilter
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.injection_identity import InjectionIdentity


class HierarchyIndex:
    """Multimap from identity to the sites sharing it.

    Mutable, owned by a single analysis pass and discarded after it.
    Buckets are insertion-ordered sets: re-recording a site is a no-op.
    Suppressed sites never enter the index.
    """

    def __init__(
        self,
        classifier: IdentityClassifier,
        suppression: SuppressionFilter,
    ) -> None:
        self._classifier = classifier
        self._suppression = suppression
        # dict as ordered set keeps iteration deterministic
        self._buckets: dict[InjectionIdentity, dict[DeclarationSite, None]] = {}

    def record(self, site: DeclarationSite) -> InjectionIdentity | None:
        """Add a site to the bucket of its identity.

        Args:
            site: Declaration to record

        Returns:
            Identity the site was filed under, None if suppressed
        """
        if self._suppression.is_suppressed(site):
            return None

        identity = self._classifier.classify(site)
        self._buckets.setdefault(identity, {})[site] = None
        return identity

    def record_all(self, sites: Iterable[DeclarationSite]) -> None:
        """Record every site."""
        for site in sites:
            self.record(site)

    def sites_for(self, identity: InjectionIdentity) -> tuple[DeclarationSite, ...]:
        """Get sites sharing an identity (empty if unknown)."""
        return tuple(self._buckets.get(identity, ()))

    def buckets(self) -> Iterator[tuple[InjectionIdentity, tuple[DeclarationSite, ...]]]:
        """Iterate (identity, sites) in insertion order."""
        for identity, sites in self._buckets.items():
            yield identity, tuple(sites)

    @property
    def identities(self) -> tuple[InjectionIdentity, ...]:
        """All recorded identities."""
        return tuple(self._buckets)

    @property
    def site_count(self) -> int:
        """Total number of recorded sites."""
        return sum(len(sites) for sites in self._buckets.values())

    def __contains__(self, identity: object) -> bool:
        return identity in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

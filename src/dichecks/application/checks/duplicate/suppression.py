"""Suppression filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.declaration_site import DeclarationSite


class SuppressionFilter:
    """Decides whether a site opted out of one check."""

    def __init__(self, check_name: str) -> None:
        if not check_name:
            raise ValueError("check_name must not be empty")
        self._check_name = check_name

    @property
    def check_name(self) -> str:
        """Check identifier matched against suppression markers."""
        return self._check_name

    def is_suppressed(self, site: DeclarationSite) -> bool:
        """Check if site carries a marker naming this check exactly."""
        return self._check_name in site.suppressed_checks

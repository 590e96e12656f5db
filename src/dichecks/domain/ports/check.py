"""Check protocol.

Users extend dichecks by implementing this Protocol.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from dichecks.domain.model.configuration import DIChecksConfig
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.issue import DICheckIssue
    from dichecks.domain.ports.type_model import TypeModelProtocol


class DICheckProtocol(Protocol):
    """Contract for checks over injection declaration sites.

    Checks keep no state between check() calls: every call is one
    complete pass over the sites of one compilation round.

    Key pattern: from_config() returns None if the check is disabled.
    """

    name: str
    """Identifier used in issues and suppression markers."""

    def check(self, sites: Iterable[DeclarationSite]) -> tuple[DICheckIssue, ...]:
        """Run the check over all sites.

        Args:
            sites: Every injection declaration of the round

        Returns:
            Issues found (empty if none)
        """
        ...

    @classmethod
    def from_config(
        cls,
        config: DIChecksConfig,
        type_model: TypeModelProtocol,
    ) -> Self | None:
        """Create check from config.

        Args:
            config: Check configuration
            type_model: Host type model

        Returns:
            Check instance if enabled, None if disabled
        """
        ...

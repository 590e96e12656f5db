"""Base check class.

Provides default implementation of DICheckProtocol.
Concrete checks inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from dichecks.domain.model.configuration import DIChecksConfig
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.issue import DICheckIssue
    from dichecks.domain.ports.type_model import TypeModelProtocol


class BaseCheck(ABC):
    """Base class for checks implementing DICheckProtocol.

    Concrete checks must:
    1. Set `name`
    2. Implement `check()`
    3. Implement `from_config()` for conditional activation
    """

    name: str
    """Identifier used in issues and suppression markers."""

    @abstractmethod
    def check(self, sites: Iterable[DeclarationSite]) -> tuple[DICheckIssue, ...]:
        """Run the check over all sites of one round.

        Args:
            sites: Every injection declaration of the round

        Returns:
            Issues found (empty if none)
        """

    @classmethod
    @abstractmethod
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

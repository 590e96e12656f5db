"""Analyzed class entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.location import Location

# Bases that never act as the superclass in a single-parent chain
IGNORED_BASES: frozenset[str] = frozenset(
    {
        "object",
        "builtins.object",
        "typing.Generic",
        "typing.Protocol",
        "typing_extensions.Protocol",
        "abc.ABC",
    }
)


@dataclass(frozen=True, slots=True)
class ClassInfo:
    """Class found in analyzed source.

    Attributes:
        qualified_name: module.Class (module.Outer.Inner for nested classes)
        bases: Resolved, erased base class names in declaration order
        location: Class statement location
    """

    qualified_name: str
    bases: tuple[str, ...] = ()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")
        if any(not base for base in self.bases):
            raise ValueError("bases must not contain empty names")

    @property
    def primary_base(self) -> str | None:
        """First base that can be a superclass, None for root classes.

        Python allows several bases; the first one that is not a typing
        or ABC marker is treated as the superclass, matching the order
        the MRO visits it in.
        """
        for base in self.bases:
            if base not in IGNORED_BASES:
                return base
        return None

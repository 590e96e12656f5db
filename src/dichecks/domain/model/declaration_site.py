"""Injection declaration site entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.location import Location
    from dichecks.domain.model.type_ref import TypeRef


@dataclass(frozen=True, slots=True)
class DeclarationSite:
    """One field-level injection declaration.

    Created once per discovered field by the host and never mutated.
    Equality is structural: the same field discovered twice is the
    same site.

    Attributes:
        name: Field name
        declared_type: Type of the field as written
        enclosing_class: Qualified name of the class declaring the field
        qualifier: Optional disambiguator (e.g. Named("...")), None if absent
        suppressed_checks: Check names the site opted out of
        location: Source anchor for diagnostics
    """

    name: str
    declared_type: TypeRef
    enclosing_class: str
    qualifier: str | None = None
    suppressed_checks: frozenset[str] = frozenset()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.declared_type is None:
            raise TypeError("declared_type must not be None")
        if not self.enclosing_class:
            raise ValueError("enclosing_class must not be empty")
        if not isinstance(self.suppressed_checks, frozenset):
            raise TypeError("suppressed_checks must be frozenset")

    @property
    def qualified_name(self) -> str:
        """Field name qualified by its enclosing class."""
        return f"{self.enclosing_class}.{self.name}"

    def __str__(self) -> str:
        """Format as Class.field: Type."""
        return f"{self.qualified_name}: {self.declared_type}"

"""Duplicate injection finding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.enums import Severity
    from dichecks.domain.model.injection_identity import InjectionIdentity


@dataclass(frozen=True, slots=True)
class DuplicateFinding:
    """A descendant class re-injecting what an ancestor already injects.

    Attributes:
        site: Declaration in the descendant class
        identity: Identity shared by both declarations
        ancestor_class: Ancestor that also declares the identity
        descendant_class: Class enclosing site
        severity: ERROR or WARNING, from the fail-on-error policy
    """

    site: DeclarationSite
    identity: InjectionIdentity
    ancestor_class: str
    descendant_class: str
    severity: Severity

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.ancestor_class:
            raise ValueError("ancestor_class must not be empty")
        if not self.descendant_class:
            raise ValueError("descendant_class must not be empty")
        if self.ancestor_class == self.descendant_class:
            raise ValueError(f"class {self.ancestor_class!r} cannot be its own ancestor")

"""Injection identity value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InjectionIdentity:
    """Comparison key deciding whether two injections are "the same".

    Two sites are duplicates of each other iff both fields match.
    None qualifiers compare equal to each other and to nothing else.

    Attributes:
        type_key: Erased name of the resolved target type
        qualifier: Qualifier copied from the site
    """

    type_key: str
    qualifier: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_key:
            raise ValueError("type_key must not be empty")

    def __str__(self) -> str:
        """Format as type_key(named='...')."""
        if self.qualifier is None:
            return self.type_key
        return f"{self.type_key}(named='{self.qualifier}')"

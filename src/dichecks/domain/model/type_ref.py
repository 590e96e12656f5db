"""Type reference value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Nominal type as written on a field, possibly parameterized.

    Examples:
        TypeRef("app.Foo")                          -> app.Foo
        TypeRef("typing.Lazy", (TypeRef("app.Foo"),)) -> typing.Lazy[app.Foo]

    Attributes:
        name: Qualified (or best-effort resolved) type name
        arguments: Generic type arguments, outermost first
    """

    name: str
    arguments: tuple[TypeRef, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not isinstance(self.arguments, tuple):
            raise TypeError("arguments must be tuple")

    @property
    def simple_name(self) -> str:
        """Last dotted component of the name."""
        return self.name.rsplit(".", 1)[-1]

    @property
    def is_generic(self) -> bool:
        """Check if the reference carries type arguments."""
        return len(self.arguments) > 0

    def erased(self) -> TypeRef:
        """Same type without its type arguments."""
        if not self.arguments:
            return self
        return TypeRef(self.name)

    def __str__(self) -> str:
        """Format as name[arg, ...]."""
        if not self.arguments:
            return self.name
        args = ", ".join(str(arg) for arg in self.arguments)
        return f"{self.name}[{args}]"

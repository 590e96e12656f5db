"""Type model protocol.

The only view of the host's type system the checks get. Any host
(AST parser, runtime introspection, a compiler plugin) supplies a thin
adapter implementing these two queries.
"""

from __future__ import annotations

from typing import Protocol


class TypeModelProtocol(Protocol):
    """Contract for class hierarchy queries.

    Example:
        class DictTypeModel:
            def __init__(self, parents: dict[str, str]) -> None:
                self._parents = parents

            def superclass_of(self, cls: str) -> str | None:
                return self._parents.get(cls)

            def is_subtype(self, type_name: str, other: str) -> bool:
                current: str | None = type_name
                while current is not None:
                    if current == other:
                        return True
                    current = self._parents.get(current)
                return False
    """

    def superclass_of(self, cls: str) -> str | None:
        """Get the superclass of a class.

        Args:
            cls: Qualified class name

        Returns:
            Qualified superclass name, None at the hierarchy root or
            when the superclass cannot be resolved
        """
        ...

    def is_subtype(self, type_name: str, other: str) -> bool:
        """Check if erased type_name is a subtype of erased other.

        Any type is a subtype of itself.

        Args:
            type_name: Qualified type name
            other: Qualified type name

        Returns:
            True if type_name is other or inherits from it
        """
        ...

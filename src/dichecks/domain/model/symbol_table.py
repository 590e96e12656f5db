"""Symbol table for name resolution."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SymbolTable:
    """Tracks imported names of one module.

    Mutable - filled during parsing.

    Handles:
    - import X                (X -> X)
    - import X as Y           (Y -> X)
    - from X import Y         (Y -> X.Y)
    - from X import Y as Z    (Z -> X.Y)

    Star imports are not tracked: names coming from them stay unresolved.

    Attributes:
        _direct: Local name -> fully qualified name mapping
    """

    _direct: dict[str, str] = field(default_factory=dict)

    def add(self, local_name: str, qualified_name: str) -> None:
        """Register an imported name.

        Raises:
            ValueError: If either name is empty
        """
        if not local_name:
            raise ValueError("local_name must not be empty")
        if not qualified_name:
            raise ValueError("qualified_name must not be empty")

        self._direct[local_name] = qualified_name

    def resolve(self, name: str) -> str | None:
        """Resolve local name to fully qualified name.

        Args:
            name: Local name to resolve (may include dots for attr access)

        Returns:
            Fully qualified name if found, None otherwise
        """
        if not name:
            raise ValueError("name must not be empty")

        if name in self._direct:
            return self._direct[name]

        # "mod.Foo" -> resolve("mod") + ".Foo"
        if "." in name:
            first, rest = name.split(".", 1)
            if first in self._direct:
                return f"{self._direct[first]}.{rest}"

        return None

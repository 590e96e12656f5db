"""Class hierarchy adapter implementing TypeModelProtocol."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dichecks.domain.model.class_info import ClassInfo


class ClassHierarchy:
    """Inheritance relationships of analyzed classes.

    Mutable - filled during parsing, read during checking.

    superclass_of() follows the primary base only, giving the
    single-parent chain the duplicate check walks. is_subtype() follows
    every base, so a provider capability mixed in second is still found.

    Classes outside the analyzed sources are opaque: a known class may
    name them as base, but they have no superclass of their own.
    """

    def __init__(self, classes: Iterable[ClassInfo] = ()) -> None:
        self._classes: dict[str, ClassInfo] = {}
        for info in classes:
            self.add(info)

    def add(self, info: ClassInfo) -> None:
        """Register a class. A later definition of the same name wins."""
        self._classes[info.qualified_name] = info

    def superclass_of(self, cls: str) -> str | None:
        """Get primary base of cls, None for roots and unknown classes."""
        info = self._classes.get(cls)
        if info is None:
            return None
        return info.primary_base

    def is_subtype(self, type_name: str, other: str) -> bool:
        """Check if type_name is other or inherits from it, through any base."""
        seen: set[str] = set()
        stack = [type_name]

        while stack:
            current = stack.pop()
            if current == other:
                return True
            if current in seen:
                continue
            seen.add(current)
            info = self._classes.get(current)
            if info is not None:
                stack.extend(info.bases)

        return False

    @property
    def class_count(self) -> int:
        """Number of analyzed classes."""
        return len(self._classes)

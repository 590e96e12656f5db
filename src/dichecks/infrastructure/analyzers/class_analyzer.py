"""Class analyzer."""

from __future__ import annotations

import ast
from collections.abc import Iterator
from typing import TYPE_CHECKING

from dichecks.domain.model.class_info import ClassInfo
from dichecks.infrastructure.analyzers.base import make_location, nested_blocks

if TYPE_CHECKING:
    from pathlib import Path

    from dichecks.infrastructure.analyzers.type_analyzer import TypeAnalyzer


class ClassAnalyzer:
    """Extracts classes and their resolved bases from a module.

    Nested classes are included as module.Outer.Inner, and so are classes
    under if, try, with and match blocks. Classes defined inside
    functions are not: they cannot be subclassed by name.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(
        self,
        tree: ast.Module,
        path: Path,
        types: TypeAnalyzer,
    ) -> tuple[tuple[ClassInfo, ast.ClassDef], ...]:
        """Analyze every class of a module.

        Args:
            tree: Parsed AST module
            path: Source file path
            types: Annotation resolver of the module

        Returns:
            (ClassInfo, ClassDef node) pairs in source order
        """
        return tuple(self._walk(tree.body, types.module_name, path, types))

    def _walk(
        self,
        body: list[ast.stmt],
        prefix: str,
        path: Path,
        types: TypeAnalyzer,
    ) -> Iterator[tuple[ClassInfo, ast.ClassDef]]:
        for node in body:
            match node:
                case ast.ClassDef(name=name):
                    qualified_name = f"{prefix}.{name}"
                    bases = tuple(types.to_type_ref(base).erased().name for base in node.bases)
                    info = ClassInfo(
                        qualified_name=qualified_name,
                        bases=bases,
                        location=make_location(node, path),
                    )
                    yield info, node
                    yield from self._walk(node.body, qualified_name, path, types)

                case _:
                    # conditional definitions: version switches, ImportError guards
                    for block in nested_blocks(node):
                        yield from self._walk(block, prefix, path, types)

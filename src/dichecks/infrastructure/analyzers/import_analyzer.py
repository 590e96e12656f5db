"""Import statement analyzer."""

from __future__ import annotations

import ast

from dichecks.domain.model.symbol_table import SymbolTable
from dichecks.infrastructure.analyzers.base import resolve_relative_import, shallow_walk


class ImportAnalyzer:
    """Builds a module's symbol table from its imports.

    Module-level imports count, including those under `if TYPE_CHECKING:`
    and try/except blocks, since annotations are usually imported there.
    Imports inside functions and classes are ignored.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(
        self,
        tree: ast.Module,
        module_name: str,
        *,
        is_package: bool = False,
    ) -> SymbolTable:
        """Collect imported names of a module.

        Args:
            tree: Parsed AST module
            module_name: Fully qualified module name
            is_package: Module is a package __init__

        Returns:
            Filled symbol table

        Raises:
            ValueError: If a relative import escapes the package
        """
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        table = SymbolTable()

        for node in shallow_walk(tree.body):
            match node:
                case ast.Import(names=names):
                    for alias in names:
                        if alias.asname is not None:
                            table.add(alias.asname, alias.name)
                        else:
                            # "import a.b" binds "a"
                            first = alias.name.split(".", 1)[0]
                            table.add(first, first)

                case ast.ImportFrom(module=module, level=level, names=names):
                    resolved = resolve_relative_import(
                        module, level, module_name, is_package=is_package
                    )
                    for alias in names:
                        if alias.name == "*":
                            continue
                        table.add(alias.asname or alias.name, f"{resolved}.{alias.name}")

        return table

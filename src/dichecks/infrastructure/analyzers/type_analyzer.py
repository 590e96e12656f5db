"""Annotation analyzer: AST expression -> TypeRef."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from dichecks.domain.model.type_ref import TypeRef
from dichecks.infrastructure.analyzers.base import dotted_name

if TYPE_CHECKING:
    from dichecks.domain.model.symbol_table import SymbolTable

_OPTIONAL_NAMES = frozenset({"typing.Optional", "typing_extensions.Optional"})
_UNION_NAMES = frozenset({"typing.Union", "typing_extensions.Union"})


class TypeAnalyzer:
    """Resolves annotations of one module into type references.

    Names are resolved through the module's imports first, then against
    names defined at module level (qualified with the module name).
    Anything else (builtins, star-imported names) is kept as written.

    Optional[X], Union[X, None] and X | None resolve to X: nullability
    does not change what is injected.
    """

    def __init__(
        self,
        symbol_table: SymbolTable,
        module_name: str,
        local_names: frozenset[str] = frozenset(),
    ) -> None:
        """Initialize analyzer.

        Args:
            symbol_table: Imports of the module
            module_name: Fully qualified module name
            local_names: Names defined at module level (classes, aliases)
        """
        if symbol_table is None:
            raise TypeError("symbol_table must not be None")
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        self._symbol_table = symbol_table
        self._module_name = module_name
        self._local_names = local_names

    @property
    def module_name(self) -> str:
        """Module whose names this analyzer resolves."""
        return self._module_name

    def resolve_name(self, name: str) -> str:
        """Resolve a dotted source name to a qualified name."""
        resolved = self._symbol_table.resolve(name)
        if resolved is not None:
            return resolved
        if name.split(".", 1)[0] in self._local_names:
            return f"{self._module_name}.{name}"
        return name

    def to_type_ref(self, node: ast.expr) -> TypeRef:
        """Convert an annotation expression to a TypeRef.

        Never fails: unsupported shapes become a TypeRef named after
        their source text.
        """
        match node:
            case ast.Constant(value=str() as text):
                return self._from_string(text)

            case ast.Name() | ast.Attribute():
                name = dotted_name(node)
                if name is not None:
                    return TypeRef(self.resolve_name(name))

            case ast.Subscript(value=value, slice=slice_):
                base = self.to_type_ref(value)
                args = slice_.elts if isinstance(slice_, ast.Tuple) else [slice_]
                return self._from_generic(base, args, node)

            case ast.BinOp(op=ast.BitOr()):
                members = [m for m in _union_members(node) if not _is_none(m)]
                if len(members) == 1:
                    return self.to_type_ref(members[0])

        return TypeRef(ast.unparse(node))

    def _from_generic(
        self,
        base: TypeRef,
        args: list[ast.expr],
        node: ast.expr,
    ) -> TypeRef:
        if base.name in _OPTIONAL_NAMES and len(args) == 1:
            return self.to_type_ref(args[0])

        if base.name in _UNION_NAMES:
            members = [a for a in args if not _is_none(a)]
            if len(members) == 1:
                return self.to_type_ref(members[0])
            return TypeRef(ast.unparse(node))

        return TypeRef(base.name, tuple(self.to_type_ref(arg) for arg in args))

    def _from_string(self, text: str) -> TypeRef:
        """Parse a forward reference ("Foo", "Lazy[Foo]")."""
        try:
            expr = ast.parse(text.strip(), mode="eval").body
        except SyntaxError:
            return TypeRef(text.strip() or repr(text))
        return self.to_type_ref(expr)


def _union_members(node: ast.expr) -> list[ast.expr]:
    """Flatten a chain of `|` operands."""
    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.BitOr):
        return [*_union_members(node.left), *_union_members(node.right)]
    return [node]


def _is_none(node: ast.expr) -> bool:
    return isinstance(node, ast.Constant) and node.value is None

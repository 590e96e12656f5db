"""Injected field analyzer."""

from __future__ import annotations

import ast
import re
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from dichecks.domain.model.declaration_site import DeclarationSite
from dichecks.infrastructure.analyzers.base import make_location, nested_blocks, simple_name

if TYPE_CHECKING:
    from pathlib import Path

    from dichecks.infrastructure.analyzers.type_analyzer import TypeAnalyzer

DEFAULT_INJECT_MARKERS: frozenset[str] = frozenset({"Inject", "inject"})
DEFAULT_NAMED_MARKER = "Named"
QUALIFIER_KEYWORDS: frozenset[str] = frozenset({"named", "name"})

SUPPRESS_PRAGMA = re.compile(r"#\s*dichecks:\s*suppress\s*=\s*(?P<names>[\w.\-]+(?:\s*,\s*[\w.\-]+)*)")


class InjectionAnalyzer:
    """Finds injected fields in a class body.

    A class-level annotated assignment is an injection when either:

        service: Annotated[Service, Inject]
        service: Annotated[Service, Inject(), Named("primary")]
        service: Service = inject()
        service: Service = inject(named="primary")

    Suppression uses a pragma comment anywhere on the statement:

        service: Service = inject()  # dichecks: suppress=duplicate-injection-in-hierarchy

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(
        self,
        inject_markers: frozenset[str] = DEFAULT_INJECT_MARKERS,
        named_marker: str = DEFAULT_NAMED_MARKER,
    ) -> None:
        """Initialize analyzer.

        Args:
            inject_markers: Simple names marking an injection
            named_marker: Simple name of the qualifier marker
        """
        if not inject_markers:
            raise ValueError("inject_markers must not be empty")
        if not named_marker:
            raise ValueError("named_marker must not be empty")

        self._inject_markers = inject_markers
        self._named_marker = named_marker

    def analyze(
        self,
        node: ast.ClassDef,
        class_name: str,
        path: Path,
        types: TypeAnalyzer,
        source_lines: Sequence[str] = (),
    ) -> tuple[DeclarationSite, ...]:
        """Extract injection sites declared in a class body.

        Fields under if/try/with/match blocks of the body count, such as
        those guarded by `if TYPE_CHECKING:`. Nested classes and methods
        are not entered.

        Args:
            node: ClassDef AST node
            class_name: Qualified name of the class
            path: Source file path
            types: Annotation resolver of the module
            source_lines: Module source lines, for suppression pragmas

        Returns:
            Sites in declaration order
        """
        if not class_name:
            raise ValueError("class_name must be non-empty string")

        sites: list[DeclarationSite] = []

        for item in _class_level_statements(node.body):
            match item:
                case ast.AnnAssign(target=ast.Name(id=field_name), annotation=annotation):
                    site = self._analyze_field(
                        item, field_name, annotation, class_name, path, types, source_lines
                    )
                    if site is not None:
                        sites.append(site)

        return tuple(sites)

    def _analyze_field(
        self,
        item: ast.AnnAssign,
        field_name: str,
        annotation: ast.expr,
        class_name: str,
        path: Path,
        types: TypeAnalyzer,
        source_lines: Sequence[str],
    ) -> DeclarationSite | None:
        annotation = _unquote(annotation)
        target, metadata = _split_annotated(annotation)

        injected = False
        qualifier: str | None = None

        # an empty Named("") still qualifies
        for marker in metadata:
            if self._is_inject_marker(marker):
                injected = True
                if qualifier is None:
                    qualifier = _keyword_qualifier(marker)
            elif simple_name(marker) == self._named_marker:
                named = _first_string_arg(marker)
                if named is not None:
                    qualifier = named

        value = item.value
        if isinstance(value, ast.Call) and self._is_inject_marker(value):
            injected = True
            if qualifier is None:
                qualifier = _keyword_qualifier(value)

        if not injected:
            return None

        location = make_location(item, path)
        return DeclarationSite(
            name=field_name,
            declared_type=types.to_type_ref(target),
            enclosing_class=class_name,
            qualifier=qualifier,
            suppressed_checks=suppressed_checks(source_lines, location.lines),
            location=location,
        )

    def _is_inject_marker(self, node: ast.expr) -> bool:
        return simple_name(node) in self._inject_markers


def _class_level_statements(body: list[ast.stmt]) -> Iterator[ast.stmt]:
    """Statements of a class body, descending into if/try/with/match blocks."""
    for item in body:
        yield item
        for block in nested_blocks(item):
            yield from _class_level_statements(block)


def suppressed_checks(source_lines: Sequence[str], lines: range) -> frozenset[str]:
    """Collect check names from suppression pragmas on the given lines.

    Args:
        source_lines: Module source lines (0-based list)
        lines: 1-based line numbers of the statement

    Returns:
        Suppressed check names (empty if no pragma)
    """
    names: set[str] = set()
    for lineno in lines:
        if not 0 < lineno <= len(source_lines):
            continue
        for match in SUPPRESS_PRAGMA.finditer(source_lines[lineno - 1]):
            names.update(n.strip() for n in match.group("names").split(","))
    return frozenset(names)


def _split_annotated(annotation: ast.expr) -> tuple[ast.expr, list[ast.expr]]:
    """Split Annotated[T, *metadata] into (T, metadata)."""
    match annotation:
        case ast.Subscript(value=value, slice=ast.Tuple(elts=[target, *metadata])):
            if simple_name(value) == "Annotated":
                return target, metadata
    return annotation, []


def _unquote(annotation: ast.expr) -> ast.expr:
    """Parse a string annotation so Annotated[...] can be inspected."""
    if isinstance(annotation, ast.Constant) and isinstance(annotation.value, str):
        try:
            return ast.parse(annotation.value.strip(), mode="eval").body
        except SyntaxError:
            return annotation
    return annotation


def _keyword_qualifier(node: ast.expr) -> str | None:
    if not isinstance(node, ast.Call):
        return None
    for keyword in node.keywords:
        if keyword.arg in QUALIFIER_KEYWORDS:
            match keyword.value:
                case ast.Constant(value=str() as value):
                    return value
    return None


def _first_string_arg(node: ast.expr) -> str | None:
    match node:
        case ast.Call(args=[ast.Constant(value=str() as value), *_]):
            return value
        case ast.Call(keywords=keywords):
            for keyword in keywords:
                if keyword.arg in QUALIFIER_KEYWORDS | {"value"}:
                    match keyword.value:
                        case ast.Constant(value=str() as value):
                            return value
    return None

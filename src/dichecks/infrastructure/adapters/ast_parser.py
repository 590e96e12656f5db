"""AST-based Python source parser.

Discovers injected fields and class relationships in Python sources:
the host side of the checks.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass
from pathlib import Path

from dichecks.domain.exceptions.parsing import ParsingError
from dichecks.domain.model.declaration_site import DeclarationSite
from dichecks.infrastructure.adapters.class_hierarchy import ClassHierarchy
from dichecks.infrastructure.analyzers.base import compute_module_name, shallow_walk
from dichecks.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from dichecks.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from dichecks.infrastructure.analyzers.injection_analyzer import (
    DEFAULT_INJECT_MARKERS,
    DEFAULT_NAMED_MARKER,
    InjectionAnalyzer,
)
from dichecks.infrastructure.analyzers.type_analyzer import TypeAnalyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceModel:
    """Everything the checks need from one compilation round.

    Attributes:
        sites: Injection declaration sites in discovery order
        hierarchy: Class hierarchy (the type model)
        module_count: Number of modules parsed
    """

    sites: tuple[DeclarationSite, ...]
    hierarchy: ClassHierarchy
    module_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.hierarchy is None:
            raise TypeError("hierarchy must not be None")
        if self.module_count < 0:
            raise ValueError(f"module_count must be >= 0, got {self.module_count}")


class PythonSourceParser:
    """Parser using Python AST to find injection sites.

    Sites and classes accumulate across parse_file() calls until
    build() is called, so a directory is parsed file by file and the
    hierarchy spans module boundaries.

    FAIL-FIRST: raises ParsingError on any parsing issue.
    """

    def __init__(
        self,
        root_path: Path,
        *,
        inject_markers: frozenset[str] = DEFAULT_INJECT_MARKERS,
        named_marker: str = DEFAULT_NAMED_MARKER,
    ) -> None:
        """Initialize parser with root path.

        Args:
            root_path: Root path for computing module names
            inject_markers: Simple names marking an injection
            named_marker: Simple name of the qualifier marker

        Raises:
            TypeError: If root_path is None
        """
        if root_path is None:
            raise TypeError("root_path must not be None")

        self._root_path = root_path
        self._import_analyzer = ImportAnalyzer()
        self._class_analyzer = ClassAnalyzer()
        self._injection_analyzer = InjectionAnalyzer(inject_markers, named_marker)
        self._sites: list[DeclarationSite] = []
        self._hierarchy = ClassHierarchy()
        self._module_count = 0

    def parse_file(self, path: Path) -> tuple[DeclarationSite, ...]:
        """Parse single Python file.

        Args:
            path: Path to .py file under root_path

        Returns:
            Injection sites found in the file

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        module_name = compute_module_name(path, self._root_path)
        return self.parse_source(
            source,
            module_name,
            path,
            is_package=path.name == "__init__.py",
        )

    def parse_source(
        self,
        source: str,
        module_name: str,
        path: Path,
        *,
        is_package: bool = False,
    ) -> tuple[DeclarationSite, ...]:
        """Parse module source text.

        Args:
            source: Module source code
            module_name: Fully qualified module name
            path: Path used in locations
            is_package: Module is a package __init__

        Returns:
            Injection sites found in the module

        Raises:
            ParsingError: If source has syntax errors or broken imports
        """
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        try:
            symbol_table = self._import_analyzer.analyze(
                tree, module_name, is_package=is_package
            )
        except ValueError as e:
            raise ParsingError(path, str(e)) from e

        types = TypeAnalyzer(symbol_table, module_name, _module_level_names(tree))
        source_lines = source.splitlines()

        sites: list[DeclarationSite] = []
        for info, node in self._class_analyzer.analyze(tree, path, types):
            self._hierarchy.add(info)
            sites.extend(
                self._injection_analyzer.analyze(
                    node, info.qualified_name, path, types, source_lines
                )
            )

        logger.debug(f"{module_name}: {len(sites)} injection sites")
        self._sites.extend(sites)
        self._module_count += 1
        return tuple(sites)

    def parse_directory(self, path: Path | None = None) -> SourceModel:
        """Parse every .py file below path, skipping __pycache__.

        Args:
            path: Directory to scan (default: root_path)

        Returns:
            SourceModel with all sites and the full hierarchy

        Raises:
            ParsingError: If any file cannot be parsed
        """
        directory = path if path is not None else self._root_path
        if not directory.is_dir():
            raise ParsingError(directory, "not a directory")

        for py_file in sorted(directory.rglob("*.py")):
            if "__pycache__" in py_file.parts:
                continue
            self.parse_file(py_file)

        model = self.build()
        logger.debug(
            f"Parsed {model.module_count} modules under {directory}: "
            f"{len(model.sites)} injection sites, {model.hierarchy.class_count} classes"
        )
        return model

    def build(self) -> SourceModel:
        """Snapshot everything parsed so far."""
        return SourceModel(
            sites=tuple(self._sites),
            hierarchy=self._hierarchy,
            module_count=self._module_count,
        )


def _module_level_names(tree: ast.Module) -> frozenset[str]:
    """Names bound at module level (classes, functions, assignments)."""
    names: set[str] = set()

    for node in shallow_walk(tree.body):
        match node:
            case ast.ClassDef(name=name) | ast.FunctionDef(name=name) | ast.AsyncFunctionDef(
                name=name
            ):
                names.add(name)
            case ast.Assign(targets=targets):
                names.update(t.id for t in targets if isinstance(t, ast.Name))
            case ast.AnnAssign(target=ast.Name(id=name)):
                names.add(name)
            case ast.TypeAlias(name=ast.Name(id=name)):
                names.add(name)

    return frozenset(names)

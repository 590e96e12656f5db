"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from dichecks.domain.model.location import Location


def make_location(node: ast.stmt | ast.expr, path: Path) -> Location:
    """Anchor a statement or expression in its file.

    Raises:
        ASTError: If the node was built without position info
    """
    from dichecks.domain.exceptions.parsing import ASTError
    from dichecks.domain.model.location import Location

    if getattr(node, "lineno", None) is None:
        raise ASTError(path, Location(file=path, line=1), f"{type(node).__name__} has no position")

    return Location(
        file=path,
        line=node.lineno,
        column=node.col_offset,
        end_line=node.end_lineno,
    )


def compute_module_name(file_path: Path, root_path: Path) -> str:
    """Compute fully qualified module name from file path.

    Args:
        file_path: Path to .py file
        root_path: Directory the package tree starts in

    Returns:
        Fully qualified module name

    Raises:
        ParsingError: If path is invalid (FAIL-FIRST)
    """
    from dichecks.domain.exceptions.parsing import ParsingError

    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ParsingError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    for part in parts:
        if not part.isidentifier():
            raise ParsingError(file_path, f"'{part}' is not valid Python identifier")

    if not parts:
        raise ParsingError(file_path, "cannot determine module name (empty)")

    return ".".join(parts)


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    current_module: str,
    *,
    is_package: bool = False,
) -> str:
    """Resolve relative import to absolute module path.

    Args:
        node_module: Module part of import (after dots)
        node_level: Number of dots (0=absolute, 1=., 2=..)
        current_module: Current module's fully qualified name
        is_package: current_module is a package (__init__.py)

    Returns:
        Absolute module path

    Raises:
        ValueError: If relative import escapes package (FAIL-FIRST)
    """
    if node_level == 0:
        if node_module is None:
            raise ValueError("absolute import must have module")
        return node_module

    parts = current_module.split(".")
    # "from . import x" inside a package refers to the package itself
    level = node_level - 1 if is_package else node_level

    if level > len(parts) or (level == len(parts) and not node_module):
        raise ValueError(
            f"relative import level {node_level} exceeds package depth of module '{current_module}'"
        )

    base_parts = parts[: len(parts) - level]

    if node_module:
        return ".".join([*base_parts, node_module])
    return ".".join(base_parts)


def shallow_walk(body: Iterable[ast.stmt]) -> Iterator[ast.AST]:
    """Walk AST nodes in body without entering nested scopes.

    Yields every node of the body but stops at FunctionDef,
    AsyncFunctionDef, ClassDef and Lambda (the node itself is yielded,
    its children are not).
    """
    stack: list[ast.AST] = list(reversed(list(body)))

    while stack:
        node = stack.pop()
        yield node

        match node:
            case ast.FunctionDef() | ast.AsyncFunctionDef() | ast.ClassDef() | ast.Lambda():
                pass
            case _:
                stack.extend(reversed(list(ast.iter_child_nodes(node))))


def nested_blocks(node: ast.stmt) -> tuple[list[ast.stmt], ...]:
    """Statement blocks of a compound statement that stay in the same scope.

    Covers if/else, try (handlers, else, finally included), with and
    match. Loops and scope-creating statements yield nothing.
    """
    match node:
        case ast.If(body=body, orelse=orelse):
            return (body, orelse)
        case ast.Try(body=body, handlers=handlers, orelse=orelse, finalbody=finalbody) | ast.TryStar(
            body=body, handlers=handlers, orelse=orelse, finalbody=finalbody
        ):
            return (body, *(handler.body for handler in handlers), orelse, finalbody)
        case ast.With(body=body) | ast.AsyncWith(body=body):
            return (body,)
        case ast.Match(cases=cases):
            return tuple(arm.body for arm in cases)
    return ()


def simple_name(node: ast.expr) -> str | None:
    """Last name component of a Name, Attribute or Call expression.

    Examples:
        Inject          -> "Inject"
        di.Inject       -> "Inject"
        di.inject(...)  -> "inject"
    """
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(attr=attr):
            return attr
        case ast.Call(func=func):
            return simple_name(func)
    return None


def dotted_name(node: ast.expr) -> str | None:
    """Dotted source name of a Name/Attribute chain, None for other shapes."""
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            prefix = dotted_name(value)
            if prefix is None:
                return None
            return f"{prefix}.{attr}"
    return None

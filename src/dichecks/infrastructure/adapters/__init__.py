"""Adapters connecting Python sources to the checks."""

from dichecks.infrastructure.adapters.ast_parser import PythonSourceParser, SourceModel
from dichecks.infrastructure.adapters.class_hierarchy import ClassHierarchy

__all__ = [
    "ClassHierarchy",
    "PythonSourceParser",
    "SourceModel",
]

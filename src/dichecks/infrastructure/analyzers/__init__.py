"""AST analyzers for the Python source host."""

from dichecks.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from dichecks.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from dichecks.infrastructure.analyzers.injection_analyzer import InjectionAnalyzer
from dichecks.infrastructure.analyzers.type_analyzer import TypeAnalyzer

__all__ = [
    "ClassAnalyzer",
    "ImportAnalyzer",
    "InjectionAnalyzer",
    "TypeAnalyzer",
]

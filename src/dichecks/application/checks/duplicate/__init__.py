"""Duplicate injection in hierarchy check."""

from dichecks.application.checks.duplicate.check import DuplicateInjectionInHierarchyCheck
from dichecks.application.checks.duplicate.classifier import IdentityClassifier
from dichecks.application.checks.duplicate.detector import DuplicateDetector
from dichecks.application.checks.duplicate.hierarchy_index import HierarchyIndex
from dichecks.application.checks.duplicate.issue import format_message, render
from dichecks.application.checks.duplicate.suppression import SuppressionFilter

__all__ = [
    "DuplicateDetector",
    "DuplicateInjectionInHierarchyCheck",
    "HierarchyIndex",
    "IdentityClassifier",
    "SuppressionFilter",
    "format_message",
    "render",
]

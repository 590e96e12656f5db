"""Checks over injection declaration sites."""

from dichecks.application.checks._base import BaseCheck
from dichecks.application.checks._registry import checks_from_config
from dichecks.application.checks.duplicate import DuplicateInjectionInHierarchyCheck

__all__ = [
    "BaseCheck",
    "DuplicateInjectionInHierarchyCheck",
    "checks_from_config",
]

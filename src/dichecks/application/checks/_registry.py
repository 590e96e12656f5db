"""Check registry.

Central registry of all checks with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dichecks.application.checks._base import BaseCheck
from dichecks.application.checks.duplicate.check import DuplicateInjectionInHierarchyCheck

if TYPE_CHECKING:
    from dichecks.domain.model.configuration import DIChecksConfig
    from dichecks.domain.ports.check import DICheckProtocol
    from dichecks.domain.ports.type_model import TypeModelProtocol


# Order matters: checks are run in this order
_ALL_CHECKS: tuple[type[BaseCheck], ...] = (
    DuplicateInjectionInHierarchyCheck,  # If config.duplicate_check_enabled
)


def checks_from_config(
    config: DIChecksConfig,
    type_model: TypeModelProtocol,
) -> tuple[DICheckProtocol, ...]:
    """Instantiate checks enabled by config.

    Args:
        config: Check configuration
        type_model: Host type model

    Returns:
        Tuple of enabled checks
    """
    checks: list[DICheckProtocol] = []

    for check_cls in _ALL_CHECKS:
        check = check_cls.from_config(config, type_model)
        if check is not None:
            checks.append(check)

    return tuple(checks)

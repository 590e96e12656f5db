"""Check configuration.

None of the options below change what the core considers a duplicate;
they only switch checks on and off, pick severities and name the
wrapper types the host environment uses.
"""

from __future__ import annotations

from dataclasses import dataclass

DUPLICATE_CHECK_NAME = "duplicate-injection-in-hierarchy"

DEFAULT_LAZY_MARKER = "Lazy"

DEFAULT_PROVIDER_TYPES: frozenset[str] = frozenset(
    {
        "injector.ProviderOf",
        "dependency_injector.providers.Provider",
    }
)


@dataclass(frozen=True, slots=True)
class DIChecksConfig:
    """Configuration DTO for all checks.

    Immutable configuration object with FAIL-FIRST validation.
    Defaults match the compiler-option defaults: every check enabled,
    every finding an error.

    Attributes:
        duplicate_check_enabled: Run the duplicate-injection check at all
        duplicate_check_fail_on_error: Findings are errors (else warnings)
        duplicate_check_name: Identifier used by suppression markers
        lazy_marker: Simple name of lazy wrapper types
        provider_types: Qualified names of provider capability types
    """

    duplicate_check_enabled: bool = True
    duplicate_check_fail_on_error: bool = True
    duplicate_check_name: str = DUPLICATE_CHECK_NAME
    lazy_marker: str = DEFAULT_LAZY_MARKER
    provider_types: frozenset[str] = DEFAULT_PROVIDER_TYPES

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.duplicate_check_enabled, bool):
            raise TypeError("duplicate_check_enabled must be bool")
        if not isinstance(self.duplicate_check_fail_on_error, bool):
            raise TypeError("duplicate_check_fail_on_error must be bool")
        if not self.duplicate_check_name:
            raise ValueError("duplicate_check_name must not be empty")
        if not self.lazy_marker:
            raise ValueError("lazy_marker must not be empty")
        if "." in self.lazy_marker:
            raise ValueError(f"lazy_marker must be a simple name, got {self.lazy_marker!r}")
        if not isinstance(self.provider_types, frozenset):
            raise TypeError("provider_types must be frozenset")
        if any(not name for name in self.provider_types):
            raise ValueError("provider_types must not contain empty names")

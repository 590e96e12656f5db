"""Compiler-style options -> DIChecksConfig.

Hosts pass flat string options (build flags, ini lines, CLI -O pairs).
Every option lives under OPTIONS_PREFIX. Unset options keep defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from dichecks.domain.exceptions.configuration import ConfigurationError
from dichecks.domain.model.configuration import DIChecksConfig

logger = logging.getLogger(__name__)

OPTIONS_PREFIX = "dichecks."

DUPLICATE_CHECK_ENABLED = OPTIONS_PREFIX + "duplicate_check.enabled"
"""Enables/disables the duplicate check."""

DUPLICATE_CHECK_FAIL_ON_ERROR = OPTIONS_PREFIX + "duplicate_check.fail_on_error"
"""Whether duplicate findings fail the build (errors) or only warn."""

DUPLICATE_CHECK_LAZY_MARKER = OPTIONS_PREFIX + "duplicate_check.lazy_marker"
"""Simple name of lazy wrapper types."""

DUPLICATE_CHECK_PROVIDER_TYPES = OPTIONS_PREFIX + "duplicate_check.provider_types"
"""Comma separated qualified names of provider capability types."""

SUPPORTED_OPTIONS: frozenset[str] = frozenset(
    {
        DUPLICATE_CHECK_ENABLED,
        DUPLICATE_CHECK_FAIL_ON_ERROR,
        DUPLICATE_CHECK_LAZY_MARKER,
        DUPLICATE_CHECK_PROVIDER_TYPES,
    }
)

CLASS_LIST_SEPARATOR = ","

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def config_from_options(
    options: Mapping[str, str],
    base: DIChecksConfig | None = None,
) -> DIChecksConfig:
    """Build configuration from string options.

    Args:
        options: Option key -> raw value
        base: Defaults for unset options (DIChecksConfig() if None)

    Returns:
        Configuration with options applied

    Raises:
        ConfigurationError: If a value cannot be interpreted
    """
    base = base or DIChecksConfig()

    for key in options:
        if key.startswith(OPTIONS_PREFIX) and key not in SUPPORTED_OPTIONS:
            logger.warning(f"Ignoring unsupported option '{key}'")

    config = DIChecksConfig(
        duplicate_check_enabled=read_flag(
            options, DUPLICATE_CHECK_ENABLED, base.duplicate_check_enabled
        ),
        duplicate_check_fail_on_error=read_flag(
            options, DUPLICATE_CHECK_FAIL_ON_ERROR, base.duplicate_check_fail_on_error
        ),
        duplicate_check_name=base.duplicate_check_name,
        lazy_marker=read_string(options, DUPLICATE_CHECK_LAZY_MARKER, base.lazy_marker),
        provider_types=frozenset(
            read_string_list(
                options, DUPLICATE_CHECK_PROVIDER_TYPES, tuple(sorted(base.provider_types))
            )
        ),
    )
    logger.debug(f"Resolved configuration: {config}")
    return config


def read_flag(options: Mapping[str, str], name: str, default: bool) -> bool:
    """Read a boolean option.

    Raises:
        ConfigurationError: If the value is not a recognized boolean
    """
    if name not in options:
        return default

    value = options[name].strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(name, f"expected a boolean, got {options[name]!r}")


def read_string(options: Mapping[str, str], name: str, default: str) -> str:
    """Read a non-empty string option.

    Raises:
        ConfigurationError: If the value is blank
    """
    if name not in options:
        return default

    value = options[name].strip()
    if not value:
        raise ConfigurationError(name, "value must not be empty")
    return value


def read_string_list(
    options: Mapping[str, str],
    name: str,
    default: tuple[str, ...],
    separator: str = CLASS_LIST_SEPARATOR,
) -> tuple[str, ...]:
    """Read a separator-delimited list option. Blank items are dropped."""
    if name not in options:
        return default
    return tuple(item.strip() for item in options[name].split(separator) if item.strip())


def parse_option_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse "key=value" strings into an options mapping.

    Later pairs override earlier ones.

    Raises:
        ConfigurationError: If a pair has no "=" or an empty key
    """
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep:
            raise ConfigurationError(pair or "<empty>", "expected key=value")
        if not key:
            raise ConfigurationError(pair, "option key must not be empty")
        options[key] = value.strip()
    return options

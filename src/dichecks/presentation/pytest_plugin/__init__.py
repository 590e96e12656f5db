"""pytest plugin for dichecks.

Provides fixtures for dependency injection checks in a test suite:
    di_config: Check configuration (override in conftest.py)
    di_source_model: Injection sites and class hierarchy of the sources
    di_check_result: Result of running every enabled check

Configuration (pytest.ini or pyproject.toml):
    dichecks_source_dir: Source directory to analyze (default: "src")
    dichecks_options: Check options, one KEY=VALUE per line
"""

from __future__ import annotations

import pytest

from dichecks.presentation.pytest_plugin.fixtures import (
    di_check_result,
    di_config,
    di_source_model,
)

__all__ = [
    "di_check_result",
    "di_config",
    "di_source_model",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "dichecks_source_dir",
        "Source directory analyzed by dichecks fixtures",
        default="src",
    )
    parser.addini(
        "dichecks_options",
        "dichecks options, one KEY=VALUE per line",
        type="linelist",
        default=[],
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the dichecks marker."""
    config.addinivalue_line(
        "markers",
        "dichecks: mark test as dependency injection check",
    )

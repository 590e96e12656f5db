"""pytest fixtures for dependency injection checks.

User overrides di_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from dichecks.application.options import config_from_options, parse_option_pairs
from dichecks.application.services import DIChecksProcessor
from dichecks.infrastructure.adapters.ast_parser import PythonSourceParser

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult
    from dichecks.domain.model.configuration import DIChecksConfig
    from dichecks.infrastructure.adapters.ast_parser import SourceModel


def source_path_from_config(config: pytest.Config) -> Path:
    """Resolve dichecks_source_dir against the pytest rootdir.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    root_dir = Path(str(config.rootpath))
    source_path = root_dir / str(config.getini("dichecks_source_dir"))

    if not source_path.is_dir():
        raise FileNotFoundError(
            f"dichecks_source_dir '{source_path}' does not exist. "
            f"Configure dichecks_source_dir in pytest.ini or pyproject.toml."
        )
    return source_path


@pytest.fixture(scope="session")
def di_config(request: pytest.FixtureRequest) -> DIChecksConfig:
    """Check configuration built from dichecks_options.

    Override this fixture in conftest.py for full control.
    """
    lines = [line for line in request.config.getini("dichecks_options") if line.strip()]
    return config_from_options(parse_option_pairs(lines))


@pytest.fixture(scope="session")
def di_source_model(request: pytest.FixtureRequest) -> SourceModel:
    """Injection sites and class hierarchy of dichecks_source_dir."""
    source_path = source_path_from_config(request.config)
    return PythonSourceParser(source_path).parse_directory()


@pytest.fixture(scope="session")
def di_check_result(
    di_source_model: SourceModel,
    di_config: DIChecksConfig,
) -> CheckResult:
    """Result of running every enabled check over the sources.

    Example:
        def test_no_duplicate_injections(di_check_result):
            assert di_check_result.passed, "\\n".join(map(str, di_check_result.issues))
    """
    processor = DIChecksProcessor.from_config(di_source_model.hierarchy, di_config)
    return processor.process(di_source_model.sites)

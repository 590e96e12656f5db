"""Tests for checks/_registry.py."""

from dichecks.application.checks import (
    BaseCheck,
    DuplicateInjectionInHierarchyCheck,
    checks_from_config,
)
from dichecks.domain.model.configuration import DIChecksConfig
from tests.factories import make_hierarchy


class TestChecksFromConfig:
    """Tests for checks_from_config."""

    def test_default_config_enables_duplicate_check(self) -> None:
        checks = checks_from_config(DIChecksConfig(), make_hierarchy({}))
        assert len(checks) == 1
        assert isinstance(checks[0], DuplicateInjectionInHierarchyCheck)
        assert isinstance(checks[0], BaseCheck)

    def test_disabled_check_skipped(self) -> None:
        config = DIChecksConfig(duplicate_check_enabled=False)
        assert checks_from_config(config, make_hierarchy({})) == ()

"""Tests for domain/model/configuration.py."""

import pytest

from dichecks.domain.model.configuration import (
    DEFAULT_PROVIDER_TYPES,
    DUPLICATE_CHECK_NAME,
    DIChecksConfig,
)


class TestDIChecksConfig:
    """Tests for DIChecksConfig."""

    def test_defaults(self) -> None:
        config = DIChecksConfig()
        assert config.duplicate_check_enabled is True
        assert config.duplicate_check_fail_on_error is True
        assert config.duplicate_check_name == DUPLICATE_CHECK_NAME
        assert config.lazy_marker == "Lazy"
        assert config.provider_types == DEFAULT_PROVIDER_TYPES

    def test_flags_must_be_bool(self) -> None:
        with pytest.raises(TypeError, match="duplicate_check_enabled must be bool"):
            DIChecksConfig(duplicate_check_enabled="false")  # type: ignore[arg-type]

    def test_lazy_marker_must_be_simple(self) -> None:
        with pytest.raises(ValueError, match="simple name"):
            DIChecksConfig(lazy_marker="dagger.Lazy")

    def test_provider_types_must_be_frozenset(self) -> None:
        with pytest.raises(TypeError, match="provider_types must be frozenset"):
            DIChecksConfig(provider_types={"app.P"})  # type: ignore[arg-type]

    def test_provider_types_no_empty_names(self) -> None:
        with pytest.raises(ValueError, match="empty names"):
            DIChecksConfig(provider_types=frozenset({""}))

    def test_empty_check_name(self) -> None:
        with pytest.raises(ValueError, match="duplicate_check_name must not be empty"):
            DIChecksConfig(duplicate_check_name="")

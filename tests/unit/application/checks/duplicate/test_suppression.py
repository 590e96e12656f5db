"""Tests for checks/duplicate/suppression.py."""

import pytest

from dichecks.application.checks.duplicate.suppression import SuppressionFilter
from tests.factories import make_site

CHECK = "duplicate-injection-in-hierarchy"


class TestSuppressionFilter:
    """Tests for SuppressionFilter.is_suppressed."""

    def test_unmarked_site(self) -> None:
        assert SuppressionFilter(CHECK).is_suppressed(make_site("app.A", "app.X")) is False

    def test_marked_with_check_name(self) -> None:
        site = make_site("app.A", "app.X", suppressed=(CHECK,))
        assert SuppressionFilter(CHECK).is_suppressed(site) is True

    def test_marked_among_other_names(self) -> None:
        site = make_site("app.A", "app.X", suppressed=("unused", CHECK))
        assert SuppressionFilter(CHECK).is_suppressed(site) is True

    def test_other_check_name_only(self) -> None:
        site = make_site("app.A", "app.X", suppressed=("forbidden-class",))
        assert SuppressionFilter(CHECK).is_suppressed(site) is False

    def test_exact_match_required(self) -> None:
        site = make_site("app.A", "app.X", suppressed=("duplicate-injection",))
        assert SuppressionFilter(CHECK).is_suppressed(site) is False

    def test_empty_check_name_raises(self) -> None:
        with pytest.raises(ValueError, match="check_name must not be empty"):
            SuppressionFilter("")

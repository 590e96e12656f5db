"""Tests for domain/model/class_info.py and symbol_table.py."""

import pytest

from dichecks.domain.model.class_info import ClassInfo
from dichecks.domain.model.symbol_table import SymbolTable


class TestClassInfo:
    """Tests for ClassInfo.primary_base."""

    def test_root(self) -> None:
        assert ClassInfo("app.A").primary_base is None

    def test_first_base(self) -> None:
        assert ClassInfo("app.C", bases=("app.B", "app.Mixin")).primary_base == "app.B"

    def test_markers_skipped(self) -> None:
        info = ClassInfo("app.C", bases=("typing.Generic", "abc.ABC", "app.B"))
        assert info.primary_base == "app.B"

    def test_only_markers(self) -> None:
        assert ClassInfo("app.P", bases=("typing.Protocol",)).primary_base is None

    def test_empty_base_rejected(self) -> None:
        with pytest.raises(ValueError, match="bases must not contain empty names"):
            ClassInfo("app.C", bases=("",))


class TestSymbolTable:
    """Tests for SymbolTable."""

    def test_direct(self) -> None:
        table = SymbolTable()
        table.add("Lazy", "dagger.Lazy")
        assert table.resolve("Lazy") == "dagger.Lazy"

    def test_attribute_chain(self) -> None:
        table = SymbolTable()
        table.add("providers", "dependency_injector.providers")
        assert table.resolve("providers.Provider") == "dependency_injector.providers.Provider"

    def test_unknown(self) -> None:
        assert SymbolTable().resolve("Foo") is None

    def test_later_import_wins(self) -> None:
        table = SymbolTable()
        table.add("Repo", "app.old.Repo")
        table.add("Repo", "app.new.Repo")
        assert table.resolve("Repo") == "app.new.Repo"

    def test_empty_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="local_name must not be empty"):
            SymbolTable().add("", "pkg.a")
        with pytest.raises(ValueError, match="name must not be empty"):
            SymbolTable().resolve("")

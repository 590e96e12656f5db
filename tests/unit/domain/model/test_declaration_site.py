"""Tests for domain/model/declaration_site.py and injection_identity.py."""

import pytest

from dichecks.domain.model.declaration_site import DeclarationSite
from dichecks.domain.model.injection_identity import InjectionIdentity
from dichecks.domain.model.type_ref import TypeRef
from tests.factories import make_site, make_type


class TestDeclarationSite:
    """Tests for DeclarationSite."""

    def test_qualified_name_and_str(self) -> None:
        site = make_site("app.B", make_type("dagger.Lazy", "app.X"), name="x")
        assert site.qualified_name == "app.B.x"
        assert str(site) == "app.B.x: dagger.Lazy[app.X]"

    def test_structural_equality(self) -> None:
        assert make_site("app.A", "app.X") == make_site("app.A", "app.X")
        assert hash(make_site("app.A", "app.X")) == hash(make_site("app.A", "app.X"))

    def test_defaults(self) -> None:
        site = DeclarationSite(name="x", declared_type=TypeRef("app.X"), enclosing_class="app.A")
        assert site.qualifier is None
        assert site.suppressed_checks == frozenset()
        assert site.location is None

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            make_site("app.A", "app.X", name="")

    def test_empty_enclosing_class_raises(self) -> None:
        with pytest.raises(ValueError, match="enclosing_class must not be empty"):
            make_site("", "app.X")

    def test_suppressed_checks_must_be_frozenset(self) -> None:
        with pytest.raises(TypeError, match="suppressed_checks must be frozenset"):
            DeclarationSite(
                name="x",
                declared_type=TypeRef("app.X"),
                enclosing_class="app.A",
                suppressed_checks={"dup"},  # type: ignore[arg-type]
            )


class TestInjectionIdentity:
    """Tests for InjectionIdentity."""

    def test_equality_includes_qualifier(self) -> None:
        assert InjectionIdentity("app.X") == InjectionIdentity("app.X", None)
        assert InjectionIdentity("app.X", "foo") != InjectionIdentity("app.X", "bar")
        assert InjectionIdentity("app.X", "foo") != InjectionIdentity("app.X")

    def test_str(self) -> None:
        assert str(InjectionIdentity("app.X")) == "app.X"
        assert str(InjectionIdentity("app.X", "foo")) == "app.X(named='foo')"

    def test_empty_type_key_raises(self) -> None:
        with pytest.raises(ValueError, match="type_key must not be empty"):
            InjectionIdentity("")

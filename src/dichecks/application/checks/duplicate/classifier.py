"""Identity classifier: declaration site -> InjectionIdentity."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from dichecks.domain.model.configuration import DEFAULT_LAZY_MARKER
from dichecks.domain.model.enums import InjectionKind
from dichecks.domain.model.injection_identity import InjectionIdentity

if TYPE_CHECKING:
    from dichecks.domain.model.declaration_site import DeclarationSite
    from dichecks.domain.model.type_ref import TypeRef
    from dichecks.domain.ports.type_model import TypeModelProtocol


class IdentityClassifier:
    """Turns declaration sites into comparable identities.

    Three injection kinds are recognized:

    - Direct: the target is created before it is required.
    - Provider: a new target is created on each get().
    - Lazy: the target is created on first use and then reused.

    The kind is not part of the identity, so a lazy injection of Foo
    in a base class and a direct injection of Foo in a subclass share
    one identity.

    Lazy wrappers are recognized by simple name, because some frameworks
    ship a Lazy type that does not implement the provider capability.
    Provider wrappers are recognized by subtyping through the type model.

    Stateless: classify() is a pure function of the site.
    """

    def __init__(
        self,
        type_model: TypeModelProtocol,
        *,
        lazy_marker: str = DEFAULT_LAZY_MARKER,
        provider_types: Iterable[str] = (),
    ) -> None:
        """Initialize classifier.

        Args:
            type_model: Host type model for subtype queries
            lazy_marker: Simple name of lazy wrapper types
            provider_types: Qualified names of provider capability types
        """
        if type_model is None:
            raise TypeError("type_model must not be None")
        if not lazy_marker:
            raise ValueError("lazy_marker must not be empty")

        self._type_model = type_model
        self._lazy_marker = lazy_marker
        self._provider_types = tuple(provider_types)

    def kind_of(self, declared_type: TypeRef) -> InjectionKind:
        """Determine how a field of this type is injected."""
        if declared_type.simple_name == self._lazy_marker:
            return InjectionKind.LAZY
        if self._is_provider(declared_type):
            return InjectionKind.PROVIDER
        return InjectionKind.DIRECT

    def classify(self, site: DeclarationSite) -> InjectionIdentity:
        """Compute the identity of a declaration site.

        Args:
            site: Declaration to classify

        Returns:
            Identity built from the erased target type and the qualifier
        """
        return InjectionIdentity(
            type_key=self.target_of(site.declared_type).name,
            qualifier=site.qualifier,
        )

    def target_of(self, declared_type: TypeRef) -> TypeRef:
        """Resolve the erased type a field actually asks for.

        Lazy[Foo] and Provider[Foo] resolve to Foo. A wrapper with zero
        or several type arguments resolves to the wrapper itself.
        Direct types resolve to themselves with arguments erased, so
        Foo[Bar] and Foo[Baz] share a target.
        """
        if self.kind_of(declared_type) is InjectionKind.DIRECT:
            return declared_type.erased()
        if len(declared_type.arguments) == 1:
            return declared_type.arguments[0].erased()
        return declared_type.erased()

    def _is_provider(self, declared_type: TypeRef) -> bool:
        name = declared_type.name
        return any(self._type_model.is_subtype(name, p) for p in self._provider_types)

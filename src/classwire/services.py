from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from classwire._internal.type_checks import is_abstract_class, is_protocol_class, is_runtime_class
from classwire.defaults import DEFAULT_LIFETIME, DEFAULT_VALIDATE_SCOPES
from classwire.exceptions import (
    ClasswireCollectionFrozenError,
    ClasswireInvalidRegistrationError,
)
from classwire.lifetime import Lifetime

if TYPE_CHECKING:
    from classwire.provider import ServiceProvider

_MISSING_INSTANCE: Any = object()


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """A single registration: which key it provides, how, and for how long."""

    provides: Any
    """The key the service is resolved by."""

    lifetime: Lifetime
    """The lifetime of the provided service."""

    concrete_type: type[Any] | None = None
    """The class instantiated to build the service, if any."""

    instance: Any = _MISSING_INSTANCE
    """A pre-built instance, for ``add_instance`` registrations."""

    @property
    def has_instance(self) -> bool:
        return self.instance is not _MISSING_INSTANCE


class ServiceCollection:
    """Mutable set of service registrations.

    A minimal container that satisfies the bulk registration helpers'
    ``register(concrete_type, lifetime)`` contract. Registrations are keyed by
    the provided type; registering a key again replaces the previous
    registration. Call ``build_provider`` once registration is complete.

    Examples:
        .. code-block:: python

            services = ServiceCollection()
            add_scoped_classes(services, "app.handlers", Handler)

            with services.build_provider() as provider, provider.create_scope() as scope:
                handler = scope.service_provider.get_required_service(CreateUserHandler)

    """

    def __init__(self) -> None:
        self._descriptors: dict[Any, ServiceDescriptor] = {}
        self._frozen = False

    def register(
        self,
        concrete_type: type[Any],
        lifetime: Lifetime = DEFAULT_LIFETIME,
        *,
        provides: Any = None,
    ) -> ServiceDescriptor:
        """Register ``concrete_type`` under ``lifetime``.

        Args:
            concrete_type: Concrete class to instantiate on resolution.
            lifetime: How long a built instance is reused.
            provides: Key to register under. Defaults to ``concrete_type``.

        Raises:
            ClasswireInvalidRegistrationError: The type is not instantiable or
                the lifetime is unknown.
            ClasswireCollectionFrozenError: The provider was already built.

        """
        self._ensure_mutable()
        self._validate_concrete_type(concrete_type)
        if not isinstance(lifetime, Lifetime):
            msg = f"Lifetime must be a Lifetime member, got {lifetime!r}."
            raise ClasswireInvalidRegistrationError(msg)

        descriptor = ServiceDescriptor(
            provides=concrete_type if provides is None else provides,
            lifetime=lifetime,
            concrete_type=concrete_type,
        )
        self._descriptors[descriptor.provides] = descriptor
        return descriptor

    def add_scoped(self, concrete_type: type[Any], *, provides: Any = None) -> ServiceDescriptor:
        return self.register(concrete_type, Lifetime.SCOPED, provides=provides)

    def add_singleton(self, concrete_type: type[Any], *, provides: Any = None) -> ServiceDescriptor:
        return self.register(concrete_type, Lifetime.SINGLETON, provides=provides)

    def add_transient(self, concrete_type: type[Any], *, provides: Any = None) -> ServiceDescriptor:
        return self.register(concrete_type, Lifetime.TRANSIENT, provides=provides)

    def add_instance(self, instance: Any, *, provides: Any = None) -> ServiceDescriptor:
        """Register a pre-built instance as a singleton."""
        self._ensure_mutable()
        descriptor = ServiceDescriptor(
            provides=type(instance) if provides is None else provides,
            lifetime=Lifetime.SINGLETON,
            instance=instance,
        )
        self._descriptors[descriptor.provides] = descriptor
        return descriptor

    def get_descriptor(self, key: Any) -> ServiceDescriptor | None:
        return self._descriptors.get(key)

    def build_provider(self, *, validate_scopes: bool = DEFAULT_VALIDATE_SCOPES) -> ServiceProvider:
        """Freeze the collection and return a root provider for it.

        Args:
            validate_scopes: Reject scoped services resolved outside a scope.

        """
        from classwire.provider import ServiceProvider

        self._frozen = True
        return ServiceProvider(self, validate_scopes=validate_scopes)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __contains__(self, key: object) -> bool:
        return key in self._descriptors

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(list(self._descriptors.values()))

    def __len__(self) -> int:
        return len(self._descriptors)

    def _ensure_mutable(self) -> None:
        if self._frozen:
            msg = "Cannot register services after build_provider() was called."
            raise ClasswireCollectionFrozenError(msg)

    def _validate_concrete_type(self, concrete_type: object) -> None:
        if not is_runtime_class(concrete_type):
            msg = f"Concrete type must be a class, got {concrete_type!r}."
            raise ClasswireInvalidRegistrationError(msg)
        if is_protocol_class(concrete_type):
            msg = f"Concrete type '{concrete_type.__qualname__}' cannot be a Protocol."
            raise ClasswireInvalidRegistrationError(msg)
        if is_abstract_class(concrete_type):
            msg = f"Concrete type '{concrete_type.__qualname__}' cannot be an abstract class."
            raise ClasswireInvalidRegistrationError(msg)


__all__ = ["ServiceCollection", "ServiceDescriptor"]

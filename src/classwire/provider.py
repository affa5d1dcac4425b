from __future__ import annotations

import logging
import threading
from inspect import Parameter
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar, overload

from classwire._internal.dependencies import ConstructorDependenciesExtractor
from classwire._internal.integrations.pydantic_settings import is_pydantic_settings_subclass
from classwire.exceptions import (
    ClasswireCircularDependencyError,
    ClasswireScopeMismatchError,
    ClasswireServiceNotRegisteredError,
)
from classwire.lifetime import Lifetime

if TYPE_CHECKING:
    from typing_extensions import Self

    from classwire.services import ServiceCollection, ServiceDescriptor

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ServiceProvider:
    """Resolve services registered in a ``ServiceCollection``.

    The root provider (returned by ``ServiceCollection.build_provider``) owns
    singleton instances. Each ``ServiceScope`` owns a child provider caching
    its scoped instances. Transient services are built on every request.

    Constructor parameters are injected by their type annotation. A parameter
    with a default value keeps it when its type is not registered.

    Resolving a scoped service from the root provider caches it at the root,
    unless the provider was built with ``validate_scopes=True``, in which case
    ``ClasswireScopeMismatchError`` is raised.
    """

    def __init__(
        self,
        services: ServiceCollection,
        *,
        validate_scopes: bool = False,
        root: ServiceProvider | None = None,
    ) -> None:
        self._services = services
        self._validate_scopes = validate_scopes
        self._root = self if root is None else root
        self._instances: dict[Any, Any] = {}
        self._disposables: list[Any] = []
        self._lock = threading.RLock()
        self._extractor = ConstructorDependenciesExtractor()

    @property
    def is_root(self) -> bool:
        return self._root is self

    @overload
    def get_service(self, key: type[T]) -> T | None: ...

    @overload
    def get_service(self, key: Any) -> Any: ...

    def get_service(self, key: Any) -> Any:
        """Return the service registered for ``key``, or ``None`` if there is none.

        Errors raised while building a registered service still propagate.
        """
        if key is not ServiceProvider and key not in self._services:
            return None
        return self._resolve(key, ())

    @overload
    def get_required_service(self, key: type[T]) -> T: ...

    @overload
    def get_required_service(self, key: Any) -> Any: ...

    def get_required_service(self, key: Any) -> Any:
        """Return the service registered for ``key``.

        Raises:
            ClasswireServiceNotRegisteredError: ``key`` or one of its required
                constructor dependencies is not registered.
            ClasswireCircularDependencyError: Constructor dependencies form a cycle.
            ClasswireScopeMismatchError: A scoped service is requested outside a
                scope while scope validation is enabled.

        """
        return self._resolve(key, ())

    def create_scope(self) -> ServiceScope:
        """Open a new scope whose provider caches scoped services separately."""
        return ServiceScope(self._root)

    def close(self) -> None:
        """Close cached instances owned by this provider, newest first.

        Instances exposing a ``close()`` method are closed; caches are cleared.
        """
        with self._lock:
            disposables = list(reversed(self._disposables))
            self._disposables.clear()
            self._instances.clear()
        for instance in disposables:
            logger.debug("Closing %s", type(instance).__qualname__)
            instance.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _resolve(self, key: Any, chain: tuple[Any, ...]) -> Any:
        if key is ServiceProvider:
            return self
        if key in chain:
            raise ClasswireCircularDependencyError((*chain, key))

        descriptor = self._services.get_descriptor(key)
        if descriptor is None:
            raise ClasswireServiceNotRegisteredError(key, chain)
        if descriptor.has_instance:
            return descriptor.instance

        if descriptor.lifetime is Lifetime.SINGLETON:
            return self._root._get_or_create(descriptor, chain)
        if descriptor.lifetime is Lifetime.SCOPED:
            if self.is_root and self._validate_scopes:
                msg = (
                    f"Scoped service '{_key_name(key)}' cannot be resolved from the root "
                    "provider. Resolve it through provider.create_scope()."
                )
                raise ClasswireScopeMismatchError(msg)
            return self._get_or_create(descriptor, chain)
        return self._create(descriptor, chain)

    def _get_or_create(self, descriptor: ServiceDescriptor, chain: tuple[Any, ...]) -> Any:
        with self._lock:
            if descriptor.provides in self._instances:
                return self._instances[descriptor.provides]
            instance = self._create(descriptor, chain)
            self._instances[descriptor.provides] = instance
            if callable(getattr(instance, "close", None)):
                self._disposables.append(instance)
            return instance

    def _create(self, descriptor: ServiceDescriptor, chain: tuple[Any, ...]) -> Any:
        concrete_type = descriptor.concrete_type
        if concrete_type is None:
            raise ClasswireServiceNotRegisteredError(descriptor.provides, chain)
        if is_pydantic_settings_subclass(concrete_type):
            return concrete_type()

        dependency_chain = (*chain, descriptor.provides)
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for dependency in self._extractor.extract(concrete_type):
            if not dependency.is_required and not self._can_resolve(dependency.provides):
                continue
            is_positional = dependency.parameter.kind is Parameter.POSITIONAL_ONLY
            # after a skipped positional-only parameter the rest keep their defaults
            if is_positional and dependency.position != len(args):
                continue
            value = self._resolve(dependency.provides, dependency_chain)
            if is_positional:
                args.append(value)
            else:
                kwargs[dependency.parameter.name] = value
        return concrete_type(*args, **kwargs)

    def _can_resolve(self, key: Any) -> bool:
        return key is ServiceProvider or key in self._services


class ServiceScope:
    """A resolution scope; scoped services are shared within it.

    Use as a context manager so scoped instances are closed on exit.
    """

    def __init__(self, root: ServiceProvider) -> None:
        self.service_provider = ServiceProvider(
            root._services,
            validate_scopes=root._validate_scopes,
            root=root,
        )

    def close(self) -> None:
        self.service_provider.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def _key_name(key: Any) -> str:
    return getattr(key, "__qualname__", repr(key))


__all__ = ["ServiceProvider", "ServiceScope"]

from __future__ import annotations

from typing import Any


class ClasswireError(Exception):
    """Represent a base class for all classwire-specific failures.

    Catch this type when you want to handle any classwire error path without
    matching each concrete exception class individually.

    Bulk registration helpers never raise these on their own behalf: they only
    surface whatever the target container raises.
    """


class ClasswireInvalidRegistrationError(ClasswireError):
    """Signal an invalid registration on ``ServiceCollection``.

    Raised by ``ServiceCollection.register`` and its lifetime shortcuts when
    the concrete type is not a class, is abstract, is a ``Protocol``, or when
    the lifetime is not a ``Lifetime`` member.

    Typical fixes include registering an implementation class instead of its
    interface, or passing one of ``Lifetime.SCOPED``/``SINGLETON``/``TRANSIENT``.
    """


class ClasswireCollectionFrozenError(ClasswireError):
    """Signal a registration attempt after the collection was built.

    ``ServiceCollection.build_provider`` freezes the collection so the provider
    sees a stable set of registrations.

    Typical fix is finishing all registrations (including bulk scans) before
    calling ``build_provider``.
    """


class ClasswireServiceNotRegisteredError(ClasswireError):
    """Signal that a service key has no registration.

    Raised by ``get_required_service`` and by constructor injection when a
    required parameter's type is not registered.
    """

    def __init__(self, service_key: Any, chain: tuple[Any, ...] = ()) -> None:
        self.service_key = service_key
        self.chain = chain
        names = " -> ".join(_key_name(key) for key in (*chain, service_key))
        super().__init__(f"Service '{_key_name(service_key)}' is not registered (path: {names}).")


class ClasswireDependencyInferenceError(ClasswireError):
    """Signal that a constructor dependency cannot be inferred.

    Common triggers are missing or unresolvable type annotations on required
    ``__init__`` parameters.

    Typical fixes include adding concrete parameter annotations or giving the
    parameter a default value.
    """


class ClasswireCircularDependencyError(ClasswireError):
    """Signal a cycle in constructor dependencies.

    Raised while resolving when a service (directly or transitively) requires
    itself.
    """

    def __init__(self, chain: tuple[Any, ...]) -> None:
        self.chain = chain
        names = " -> ".join(_key_name(key) for key in chain)
        super().__init__(f"Circular dependency detected: {names}.")


class ClasswireScopeMismatchError(ClasswireError):
    """Signal resolution of a scoped service outside of a scope.

    Only raised when the provider was built with ``validate_scopes=True``:
    either a scoped service is requested from the root provider, or a
    singleton depends on a scoped service.

    Typical fix is resolving through ``provider.create_scope()``.
    """


def _key_name(key: Any) -> str:
    return getattr(key, "__qualname__", repr(key))

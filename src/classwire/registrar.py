"""Bulk registration of scanned classes into a dependency-injection container.

Every helper here scans one or more modules for concrete classes that satisfy
a criterion (ancestry or marker), calls the container's ``register`` once per
match, and returns the matched classes in scan order: module order first,
then declaration order within each module.

The helpers keep no state between calls and validate nothing beyond the
criterion arguments: a reference type that is not a class, or a marker type
that is not a ``Marker`` subclass, raises ``TypeError`` before any module is
scanned. Those are the only errors raised here; whatever the container or
the module import raises propagates to the caller unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any, Protocol

from classwire.catalog import ModuleLike, iter_module_types
from classwire.criteria import AncestryCriterion, MarkerCriterion, MatchCriterion, matches_concrete
from classwire.lifetime import Lifetime
from classwire.markers import Marker

logger = logging.getLogger(__name__)

RegisterCallback = Callable[[type[Any]], object]


class ServiceRegistry(Protocol):
    """Container collaborator accepted by the bulk registration helpers.

    ``classwire.ServiceCollection`` implements it; any container exposing a
    compatible ``register`` can be adapted with a small wrapper.
    """

    def register(self, concrete_type: type[Any], lifetime: Lifetime) -> object: ...


def register_by_ancestry(
    container: ServiceRegistry,
    module: ModuleLike,
    reference_type: type[Any],
    lifetime: Lifetime,
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register concrete classes of ``module`` that are, extend or implement ``reference_type``.

    Args:
        container: Registry receiving one ``register(cls, lifetime)`` call per match.
        module: Module object or dotted module name to scan.
        reference_type: Base class, ABC, or protocol the classes must derive from.
        lifetime: Lifetime passed through to the container.
        include_submodules: Also scan every submodule when ``module`` is a package.

    Returns:
        Registered classes in declaration order. Empty when nothing matches.

    """
    return _register_matching_in_module(
        module,
        AncestryCriterion(reference_type),
        _lifetime_callback(container, lifetime),
        include_submodules=include_submodules,
    )


def register_by_marker(
    container: ServiceRegistry,
    module: ModuleLike,
    marker_type: type[Marker],
    lifetime: Lifetime,
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register concrete classes of ``module`` carrying a ``marker_type`` marker.

    Markers inherited from base classes count. Abstract classes and protocols
    are skipped even when they carry the marker.

    Args:
        container: Registry receiving one ``register(cls, lifetime)`` call per match.
        module: Module object or dotted module name to scan.
        marker_type: ``Marker`` subclass the classes must carry.
        lifetime: Lifetime passed through to the container.
        include_submodules: Also scan every submodule when ``module`` is a package.

    Returns:
        Registered classes in declaration order. Empty when nothing matches.

    """
    return _register_matching_in_module(
        module,
        MarkerCriterion(marker_type),
        _lifetime_callback(container, lifetime),
        include_submodules=include_submodules,
    )


def register_matching(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    criterion: MatchCriterion,
    lifetime: Lifetime,
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register concrete classes matching ``criterion`` across ``modules``.

    Each module is scanned independently, in the given order, and the results
    are concatenated. A class reachable from two modules is registered twice.
    """
    register = _lifetime_callback(container, lifetime)
    registered: list[type[Any]] = []
    for module in _as_module_list(modules):
        registered.extend(
            _register_matching_in_module(
                module,
                criterion,
                register,
                include_submodules=include_submodules,
            ),
        )
    return registered


def add_scoped_classes(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    reference_type: type[Any],
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register scoped classes that have ``reference_type`` as a base class or interface."""
    return register_matching(
        container,
        modules,
        AncestryCriterion(reference_type),
        Lifetime.SCOPED,
        include_submodules=include_submodules,
    )


def add_singleton_classes(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    reference_type: type[Any],
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register singleton classes that have ``reference_type`` as a base class or interface."""
    return register_matching(
        container,
        modules,
        AncestryCriterion(reference_type),
        Lifetime.SINGLETON,
        include_submodules=include_submodules,
    )


def add_transient_classes(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    reference_type: type[Any],
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register transient classes that have ``reference_type`` as a base class or interface."""
    return register_matching(
        container,
        modules,
        AncestryCriterion(reference_type),
        Lifetime.TRANSIENT,
        include_submodules=include_submodules,
    )


def add_scoped_classes_with_marker(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    marker_type: type[Marker],
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register scoped classes decorated with a ``marker_type`` marker."""
    return register_matching(
        container,
        modules,
        MarkerCriterion(marker_type),
        Lifetime.SCOPED,
        include_submodules=include_submodules,
    )


def add_singleton_classes_with_marker(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    marker_type: type[Marker],
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register singleton classes decorated with a ``marker_type`` marker."""
    return register_matching(
        container,
        modules,
        MarkerCriterion(marker_type),
        Lifetime.SINGLETON,
        include_submodules=include_submodules,
    )


def add_transient_classes_with_marker(
    container: ServiceRegistry,
    modules: ModuleLike | Iterable[ModuleLike],
    marker_type: type[Marker],
    *,
    include_submodules: bool = False,
) -> list[type[Any]]:
    """Register transient classes decorated with a ``marker_type`` marker."""
    return register_matching(
        container,
        modules,
        MarkerCriterion(marker_type),
        Lifetime.TRANSIENT,
        include_submodules=include_submodules,
    )


def _register_matching_in_module(
    module: ModuleLike,
    criterion: MatchCriterion,
    register: RegisterCallback,
    *,
    include_submodules: bool,
) -> list[type[Any]]:
    matched = [
        candidate
        for candidate in iter_module_types(module, include_submodules=include_submodules)
        if matches_concrete(criterion, candidate)
    ]
    for concrete_type in matched:
        register(concrete_type)
        logger.debug("Registered %s.%s", concrete_type.__module__, concrete_type.__qualname__)
    logger.debug(
        "Scanned %s with %r: %d class(es) registered",
        _module_name(module),
        criterion,
        len(matched),
    )
    return matched


def _lifetime_callback(container: ServiceRegistry, lifetime: Lifetime) -> RegisterCallback:
    def register(concrete_type: type[Any]) -> object:
        return container.register(concrete_type, lifetime)

    return register


def _as_module_list(modules: ModuleLike | Iterable[ModuleLike]) -> list[ModuleLike]:
    if isinstance(modules, (ModuleType, str)):
        return [modules]
    return list(modules)


def _module_name(module: ModuleLike) -> str:
    return module if isinstance(module, str) else module.__name__


__all__ = [
    "ServiceRegistry",
    "add_scoped_classes",
    "add_scoped_classes_with_marker",
    "add_singleton_classes",
    "add_singleton_classes_with_marker",
    "add_transient_classes",
    "add_transient_classes_with_marker",
    "register_by_ancestry",
    "register_by_marker",
    "register_matching",
]

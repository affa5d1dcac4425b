from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Iterator
from types import ModuleType
from typing import Any, TypeAlias

from classwire._internal.type_checks import is_runtime_class

logger = logging.getLogger(__name__)

ModuleLike: TypeAlias = ModuleType | str
"""A module object or its dotted import name."""


def resolve_module(module: ModuleLike) -> ModuleType:
    """Return the module object for ``module``, importing it by name if needed.

    Import errors propagate unchanged.
    """
    if isinstance(module, ModuleType):
        return module
    return importlib.import_module(module)


def iter_submodules(package: ModuleType) -> Iterator[ModuleType]:
    """Import and yield every submodule of ``package`` in walk order.

    Plain modules (no ``__path__``) have no submodules. Import errors
    propagate unchanged.
    """
    search_path = getattr(package, "__path__", None)
    if search_path is None:
        return
    for module_info in pkgutil.walk_packages(search_path, f"{package.__name__}."):
        submodule = importlib.import_module(module_info.name)
        logger.debug("Imported module for scanning: %s", module_info.name)
        yield submodule


def iter_module_types(
    module: ModuleLike,
    *,
    include_submodules: bool = False,
) -> Iterator[type[Any]]:
    """Yield classes defined in ``module`` in declaration order.

    Only classes whose ``__module__`` is the scanned module count as defined
    there; names imported from other modules are skipped, and each class is
    yielded once even when bound to several names. Classes nested in a
    yielded class follow it, depth first.

    Declaration order is the insertion order of the module namespace: a name
    bound before its class statement (``Foo = None`` ahead of ``class Foo``)
    keeps that earlier position.

    Args:
        module: Module object or dotted module name.
        include_submodules: Also scan every submodule of a package, after the
            package itself.

    """
    resolved = resolve_module(module)
    yield from _iter_defined_classes(resolved)
    if include_submodules:
        for submodule in iter_submodules(resolved):
            yield from _iter_defined_classes(submodule)


def _iter_defined_classes(module: ModuleType) -> Iterator[type[Any]]:
    seen_ids: set[int] = set()
    for value in list(vars(module).values()):
        if not is_runtime_class(value):
            continue
        if value.__module__ != module.__name__:
            continue
        yield from _iter_class_tree(value, seen_ids)


def _iter_class_tree(cls: type[Any], seen_ids: set[int]) -> Iterator[type[Any]]:
    if id(cls) in seen_ids:
        return
    seen_ids.add(id(cls))
    yield cls
    for value in list(vars(cls).values()):
        if _is_nested_class(value, cls):
            yield from _iter_class_tree(value, seen_ids)


def _is_nested_class(value: object, owner: type[Any]) -> bool:
    # class attributes aliasing other classes are not nested definitions
    return (
        is_runtime_class(value)
        and value.__module__ == owner.__module__
        and value.__qualname__ == f"{owner.__qualname__}.{value.__name__}"
    )


__all__ = ["ModuleLike", "iter_module_types", "iter_submodules", "resolve_module"]

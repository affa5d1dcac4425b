from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_protocol_class(candidate: object) -> bool:
    """Return true when candidate is a ``typing.Protocol`` definition.

    Concrete classes that merely inherit from a protocol are not protocols
    themselves, so the check reads the class's own ``_is_protocol`` flag.
    """
    return is_runtime_class(candidate) and bool(candidate.__dict__.get("_is_protocol", False))


def is_abstract_class(candidate: object) -> bool:
    return is_runtime_class(candidate) and inspect.isabstract(candidate)


def is_concrete_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate can be registered as an implementation type.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    if not is_runtime_class(candidate):
        return False
    if is_protocol_class(candidate):
        return False
    return not inspect.isabstract(candidate)


__all__ = [
    "is_abstract_class",
    "is_concrete_class",
    "is_protocol_class",
    "is_runtime_class",
]

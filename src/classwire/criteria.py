from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from classwire._internal.type_checks import (
    is_concrete_class,
    is_protocol_class,
    is_runtime_class,
)
from classwire.markers import Marker, has_marker


class MatchCriterion(Protocol):
    """Predicate deciding which scanned classes are registered."""

    def matches(self, candidate: type[Any]) -> bool: ...


@dataclass(frozen=True, slots=True)
class AncestryCriterion:
    """Match classes that are, extend, or implement ``reference_type``.

    Protocol references match classes that list the protocol among their
    bases. Structural conformance alone is not enough, so a class is never
    picked up just because it happens to have the right methods.
    """

    reference_type: type[Any]

    def __post_init__(self) -> None:
        if not is_runtime_class(self.reference_type):
            msg = f"Reference type must be a class, got {self.reference_type!r}."
            raise TypeError(msg)

    def matches(self, candidate: type[Any]) -> bool:
        if is_protocol_class(self.reference_type):
            return self.reference_type in candidate.__mro__
        return issubclass(candidate, self.reference_type)


@dataclass(frozen=True, slots=True)
class MarkerCriterion:
    """Match classes carrying at least one marker of ``marker_type``."""

    marker_type: type[Marker]
    inherit: bool = True

    def __post_init__(self) -> None:
        if not (is_runtime_class(self.marker_type) and issubclass(self.marker_type, Marker)):
            msg = f"Marker type must be a Marker subclass, got {self.marker_type!r}."
            raise TypeError(msg)

    def matches(self, candidate: type[Any]) -> bool:
        return has_marker(candidate, self.marker_type, inherit=self.inherit)


def is_interface(candidate: object) -> bool:
    """Return true when ``candidate`` is a ``typing.Protocol`` class.

    Classes implementing a protocol are not interfaces themselves.
    """
    return is_protocol_class(candidate)


def matches_concrete(criterion: MatchCriterion, candidate: type[Any]) -> bool:
    """Return true when ``candidate`` is concrete and satisfies ``criterion``."""
    return is_concrete_class(candidate) and criterion.matches(candidate)


__all__ = [
    "AncestryCriterion",
    "MarkerCriterion",
    "MatchCriterion",
    "is_concrete_class",
    "is_interface",
    "matches_concrete",
]

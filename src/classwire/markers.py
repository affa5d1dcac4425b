from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from classwire._internal.type_checks import is_runtime_class

C = TypeVar("C", bound=type[Any])
M = TypeVar("M", bound="Marker")

_MARKERS_ATTRIBUTE = "__classwire_markers__"


class Marker:
    """Declarative tag attached to a class definition.

    Subclass ``Marker`` to define a marker type and apply an instance of it as
    a class decorator. The decorated class is returned unchanged; the marker
    is recorded on the class so it can be queried without instantiating it.
    Marker subclasses may be dataclasses carrying values.

    Set ``inherited = False`` on a marker type to make it visible only on the
    class that declares it, not on subclasses.

    Examples:
        .. code-block:: python

            class Repository(Marker): ...


            @Repository()
            class UserRepository: ...


            assert has_marker(UserRepository, Repository)

    """

    inherited: ClassVar[bool] = True

    def __call__(self, cls: C) -> C:
        if not is_runtime_class(cls):
            msg = f"Marker {type(self).__qualname__} can only decorate classes, got {cls!r}."
            raise TypeError(msg)
        own_markers: tuple[Marker, ...] = cls.__dict__.get(_MARKERS_ATTRIBUTE, ())
        # decorators apply bottom-up; keep source order
        setattr(cls, _MARKERS_ATTRIBUTE, (self, *own_markers))
        return cls


def declared_markers(cls: type[Any]) -> tuple[Marker, ...]:
    """Return markers applied directly to ``cls``, in source order."""
    return cls.__dict__.get(_MARKERS_ATTRIBUTE, ())


def get_markers(
    cls: type[Any],
    marker_type: type[M] = Marker,  # type: ignore[assignment]
    *,
    inherit: bool = True,
) -> tuple[M, ...]:
    """Return markers of ``marker_type`` carried by ``cls``.

    Markers declared on ``cls`` come first, followed by markers inherited
    from its ancestors in MRO order. Markers whose type sets
    ``inherited = False`` are only reported for the declaring class.

    Args:
        cls: Class to inspect.
        marker_type: Marker type to look for; subclasses of it match too.
        inherit: Whether to include markers declared on ancestors.

    """
    found: list[M] = []
    for owner in cls.__mro__ if inherit else (cls,):
        for marker in declared_markers(owner):
            if not isinstance(marker, marker_type):
                continue
            if owner is not cls and not marker.inherited:
                continue
            found.append(marker)
    return tuple(found)


def has_marker(cls: type[Any], marker_type: type[Marker], *, inherit: bool = True) -> bool:
    """Return true when ``cls`` carries at least one marker of ``marker_type``."""
    return bool(get_markers(cls, marker_type, inherit=inherit))


__all__ = ["Marker", "declared_markers", "get_markers", "has_marker"]

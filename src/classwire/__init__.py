from classwire.catalog import iter_module_types, resolve_module
from classwire.criteria import AncestryCriterion, MarkerCriterion, MatchCriterion
from classwire.exceptions import (
    ClasswireCircularDependencyError,
    ClasswireCollectionFrozenError,
    ClasswireDependencyInferenceError,
    ClasswireError,
    ClasswireInvalidRegistrationError,
    ClasswireScopeMismatchError,
    ClasswireServiceNotRegisteredError,
)
from classwire.lifetime import Lifetime
from classwire.markers import Marker, get_markers, has_marker
from classwire.provider import ServiceProvider, ServiceScope
from classwire.registrar import (
    ServiceRegistry,
    add_scoped_classes,
    add_scoped_classes_with_marker,
    add_singleton_classes,
    add_singleton_classes_with_marker,
    add_transient_classes,
    add_transient_classes_with_marker,
    register_by_ancestry,
    register_by_marker,
    register_matching,
)
from classwire.services import ServiceCollection, ServiceDescriptor

__all__ = [
    "AncestryCriterion",
    "ClasswireCircularDependencyError",
    "ClasswireCollectionFrozenError",
    "ClasswireDependencyInferenceError",
    "ClasswireError",
    "ClasswireInvalidRegistrationError",
    "ClasswireScopeMismatchError",
    "ClasswireServiceNotRegisteredError",
    "Lifetime",
    "Marker",
    "MarkerCriterion",
    "MatchCriterion",
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceProvider",
    "ServiceRegistry",
    "ServiceScope",
    "add_scoped_classes",
    "add_scoped_classes_with_marker",
    "add_singleton_classes",
    "add_singleton_classes_with_marker",
    "add_transient_classes",
    "add_transient_classes_with_marker",
    "get_markers",
    "has_marker",
    "iter_module_types",
    "register_by_ancestry",
    "register_by_marker",
    "register_matching",
    "resolve_module",
]

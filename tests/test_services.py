from abc import ABC, abstractmethod
from typing import Protocol

import pytest

from classwire import (
    ClasswireCollectionFrozenError,
    ClasswireInvalidRegistrationError,
    Lifetime,
    ServiceCollection,
)
from classwire.defaults import DEFAULT_LIFETIME


class IGreeter(Protocol):
    def greet(self) -> str: ...


class AbstractGreeter(ABC):
    @abstractmethod
    def greet(self) -> str: ...


class EnglishGreeter(AbstractGreeter):
    def greet(self) -> str:
        return "hello"


class FrenchGreeter(AbstractGreeter):
    def greet(self) -> str:
        return "bonjour"


def test_register_defaults_to_transient(services: ServiceCollection) -> None:
    descriptor = services.register(EnglishGreeter)

    assert descriptor.lifetime is DEFAULT_LIFETIME is Lifetime.TRANSIENT
    assert descriptor.provides is EnglishGreeter
    assert descriptor.concrete_type is EnglishGreeter
    assert not descriptor.has_instance


@pytest.mark.parametrize(
    ("method_name", "expected_lifetime"),
    [
        ("add_scoped", Lifetime.SCOPED),
        ("add_singleton", Lifetime.SINGLETON),
        ("add_transient", Lifetime.TRANSIENT),
    ],
)
def test_lifetime_shortcuts(
    services: ServiceCollection,
    method_name: str,
    expected_lifetime: Lifetime,
) -> None:
    descriptor = getattr(services, method_name)(EnglishGreeter)

    assert descriptor.lifetime is expected_lifetime


def test_register_under_explicit_key(services: ServiceCollection) -> None:
    services.add_scoped(EnglishGreeter, provides=AbstractGreeter)

    assert AbstractGreeter in services
    assert EnglishGreeter not in services


def test_last_registration_for_key_wins(services: ServiceCollection) -> None:
    services.add_scoped(EnglishGreeter, provides=AbstractGreeter)
    services.add_singleton(FrenchGreeter, provides=AbstractGreeter)

    descriptor = services.get_descriptor(AbstractGreeter)

    assert len(services) == 1
    assert descriptor is not None
    assert descriptor.concrete_type is FrenchGreeter
    assert descriptor.lifetime is Lifetime.SINGLETON


def test_iteration_follows_registration_order(services: ServiceCollection) -> None:
    services.add_scoped(FrenchGreeter)
    services.add_scoped(EnglishGreeter)

    assert [descriptor.provides for descriptor in services] == [FrenchGreeter, EnglishGreeter]


def test_add_instance_registers_singleton(services: ServiceCollection) -> None:
    greeter = EnglishGreeter()

    descriptor = services.add_instance(greeter, provides=AbstractGreeter)

    assert descriptor.has_instance
    assert descriptor.instance is greeter
    assert descriptor.lifetime is Lifetime.SINGLETON
    assert descriptor.concrete_type is None


@pytest.mark.parametrize("concrete_type", [AbstractGreeter, IGreeter])
def test_register_rejects_abstract_and_protocol_types(
    services: ServiceCollection,
    concrete_type: type,
) -> None:
    with pytest.raises(ClasswireInvalidRegistrationError, match="cannot be"):
        services.register(concrete_type, Lifetime.SCOPED)


def test_register_rejects_non_class(services: ServiceCollection) -> None:
    with pytest.raises(ClasswireInvalidRegistrationError, match="must be a class"):
        services.register(EnglishGreeter(), Lifetime.SCOPED)  # type: ignore[arg-type]


def test_register_rejects_unknown_lifetime(services: ServiceCollection) -> None:
    with pytest.raises(ClasswireInvalidRegistrationError, match="Lifetime member"):
        services.register(EnglishGreeter, "scoped")  # type: ignore[arg-type]


def test_build_provider_freezes_collection(services: ServiceCollection) -> None:
    services.add_scoped(EnglishGreeter)
    services.build_provider()

    assert services.is_frozen
    with pytest.raises(ClasswireCollectionFrozenError):
        services.add_scoped(FrenchGreeter)
    with pytest.raises(ClasswireCollectionFrozenError):
        services.add_instance(FrenchGreeter())

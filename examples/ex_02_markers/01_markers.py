"""Markers: register classes tagged with a decorator.

Define a ``Marker`` subclass, tag classes with it, and register every
concrete tagged class as a singleton. Abstract classes carrying the marker are
skipped, but their concrete subclasses inherit it.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from classwire import Marker, ServiceCollection, add_singleton_classes_with_marker, has_marker


class Repository(Marker):
    pass


@Repository()
class UserRepository:
    pass


@Repository()
class BaseAuditRepository(ABC):
    @abstractmethod
    def table(self) -> str: ...


class LoginAuditRepository(BaseAuditRepository):
    def table(self) -> str:
        return "login_audit"


class Mailer:
    pass


def main() -> None:
    services = ServiceCollection()
    registered = add_singleton_classes_with_marker(services, sys.modules[__name__], Repository)

    print(f"registered={[cls.__name__ for cls in registered]}")  # => registered=['UserRepository', 'LoginAuditRepository']
    print(f"inherited={has_marker(LoginAuditRepository, Repository)}")  # => inherited=True
    print(f"mailer_registered={Mailer in services}")  # => mailer_registered=False

    with services.build_provider() as provider:
        first = provider.get_required_service(UserRepository)
        second = provider.get_required_service(UserRepository)

    print(f"singleton_same={first is second}")  # => singleton_same=True


if __name__ == "__main__":
    main()

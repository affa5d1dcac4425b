"""Quickstart: register every implementation of a base class in one call.

Scan a module for concrete subclasses of ``Notifier``, register them as
scoped services, and resolve one with its dependencies wired from type hints.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from classwire import ServiceCollection, add_scoped_classes


class Notifier(ABC):
    @abstractmethod
    def notify(self, user: str) -> str: ...


class EmailNotifier(Notifier):
    def notify(self, user: str) -> str:
        return f"email to {user}"


class SmsNotifier(Notifier):
    def notify(self, user: str) -> str:
        return f"sms to {user}"


class Signup:
    def __init__(self, email: EmailNotifier, sms: SmsNotifier) -> None:
        self.notifiers = (email, sms)


def main() -> None:
    services = ServiceCollection()
    registered = add_scoped_classes(services, sys.modules[__name__], Notifier)
    services.add_transient(Signup)

    print(f"registered={[cls.__name__ for cls in registered]}")  # => registered=['EmailNotifier', 'SmsNotifier']

    with services.build_provider() as provider, provider.create_scope() as scope:
        signup = scope.service_provider.get_required_service(Signup)
        messages = [notifier.notify("ada") for notifier in signup.notifiers]

    print(f"messages={messages}")  # => messages=['email to ada', 'sms to ada']


if __name__ == "__main__":
    main()

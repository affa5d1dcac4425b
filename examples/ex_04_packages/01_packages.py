"""Packages: scan a package and all of its submodules.

Pass a dotted package name and ``include_submodules=True`` to pick up
handlers spread across the package's modules, in import-walk order.
"""

from __future__ import annotations

from classwire import ServiceCollection, add_transient_classes
from handlers import CommandHandler


def main() -> None:
    services = ServiceCollection()

    shallow = add_transient_classes(ServiceCollection(), "handlers", CommandHandler)
    print(f"package_only={[cls.__name__ for cls in shallow]}")  # => package_only=[]

    registered = add_transient_classes(
        services,
        "handlers",
        CommandHandler,
        include_submodules=True,
    )
    print(f"registered={[cls.__name__ for cls in registered]}")  # => registered=['CreateUserHandler', 'DeleteUserHandler']

    with services.build_provider() as provider:
        results = [provider.get_required_service(cls).handle() for cls in registered]

    print(f"results={results}")  # => results=['user created', 'user deleted']


if __name__ == "__main__":
    main()

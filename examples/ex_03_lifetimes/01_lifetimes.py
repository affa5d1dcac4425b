"""Lifetimes: ``TRANSIENT``, ``SCOPED`` and ``SINGLETON``.

See how object identity changes across repeated resolves and scope
boundaries for classes registered in bulk with each lifetime.
"""

from __future__ import annotations

import sys

from classwire import (
    Lifetime,
    ServiceCollection,
    add_scoped_classes,
    add_singleton_classes,
    add_transient_classes,
)


class TransientService:
    pass


class ScopedService:
    pass


class SingletonService:
    pass


def main() -> None:
    module = sys.modules[__name__]
    services = ServiceCollection()
    add_transient_classes(services, module, TransientService)
    add_scoped_classes(services, module, ScopedService)
    add_singleton_classes(services, module, SingletonService)

    print(f"lifetimes={[descriptor.lifetime.value for descriptor in services]}")  # => lifetimes=['transient', 'scoped', 'singleton']

    provider = services.build_provider()
    with provider.create_scope() as first_scope, provider.create_scope() as second_scope:
        first = first_scope.service_provider
        second = second_scope.service_provider

        transient_new = first.get_service(TransientService) is not first.get_service(TransientService)
        scoped_same_within = first.get_service(ScopedService) is first.get_service(ScopedService)
        scoped_diff_across = first.get_service(ScopedService) is not second.get_service(ScopedService)
        singleton_shared = first.get_service(SingletonService) is second.get_service(SingletonService)

    print(f"transient_new={transient_new}")  # => transient_new=True
    print(f"scoped_same_within={scoped_same_within}")  # => scoped_same_within=True
    print(f"scoped_diff_across={scoped_diff_across}")  # => scoped_diff_across=True
    print(f"singleton_shared={singleton_shared}")  # => singleton_shared=True
    print(f"scoped_lifetime={Lifetime.SCOPED.value}")  # => scoped_lifetime=scoped


if __name__ == "__main__":
    main()

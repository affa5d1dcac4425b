from __future__ import annotations

from enum import Enum


class Lifetime(str, Enum):
    """Defines the lifetime of a service in the container.

    Bulk registration passes the value through to the target container
    unchanged; what each lifetime means is up to that container.
    """

    TRANSIENT = "transient"
    """A new instance is created every time the service is requested."""

    SINGLETON = "singleton"
    """A single instance is created and shared for the lifetime of the container."""

    SCOPED = "scoped"
    """Instance is shared within a scope, different instances across scopes."""

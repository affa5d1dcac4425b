from classwire.lifetime import Lifetime

DEFAULT_LIFETIME = Lifetime.TRANSIENT
"""Lifetime used by ``ServiceCollection.register`` when none is given."""

DEFAULT_VALIDATE_SCOPES = False
"""Whether ``ServiceCollection.build_provider`` rejects scoped services outside a scope."""

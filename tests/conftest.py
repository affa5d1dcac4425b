"""Shared pytest fixtures for classwire tests."""

from types import ModuleType
from typing import Any

import pytest

import scan_targets.models
import scan_targets.other
from classwire import Lifetime, ServiceCollection


class RecordingRegistry:
    """Registry that only records ``register`` calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[type[Any], Lifetime]] = []

    def register(self, concrete_type: type[Any], lifetime: Lifetime) -> None:
        self.calls.append((concrete_type, lifetime))


@pytest.fixture()
def services() -> ServiceCollection:
    """Empty service collection."""
    return ServiceCollection()


@pytest.fixture()
def recording_registry() -> RecordingRegistry:
    """Registry recording ``(concrete_type, lifetime)`` pairs."""
    return RecordingRegistry()


@pytest.fixture()
def models_module() -> ModuleType:
    """Module declaring the IFace/Base/Super1/Super2/Plain hierarchy and marked classes."""
    return scan_targets.models


@pytest.fixture()
def other_module() -> ModuleType:
    """Second module extending the hierarchy of ``models_module``."""
    return scan_targets.other

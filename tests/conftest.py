"""Root pytest configuration for all tests.

Domain tests build catalogs and endpoints directly from Value Objects; no
fixtures here touch the filesystem.
"""

from __future__ import annotations

import pytest

from domain.devices.catalog import DeviceCatalog
from domain.devices.value_objects import DeviceDefinition


def make_device(
    name: str,
    power: float,
    exponent: float = 1.0,
    aliases: tuple[str, ...] = (),
    **fields,
) -> DeviceDefinition:
    """Shorthand for building a DeviceDefinition in tests."""
    return DeviceDefinition(
        name=name,
        aliases=aliases,
        power=power,
        combinability_exponent=exponent,
        **fields,
    )


@pytest.fixture
def catalog() -> DeviceCatalog:
    """Fresh catalog seeded with built-ins (never shared between tests)."""
    return DeviceCatalog.with_builtins()


@pytest.fixture
def basic() -> DeviceDefinition:
    return make_device("Basic", power=5, exponent=1.0)

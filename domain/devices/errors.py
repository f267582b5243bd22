"""Devices Bounded Context - Error Hierarchy.

Custom exceptions for catalog construction and device lookup.
"""

from __future__ import annotations


class DeviceError(Exception):
    """Base error for device operations."""


class CatalogConflictError(DeviceError):
    """Two different definitions in one load batch claim the same key.

    Attributes:
        key: The colliding name or alias
        names: Names of the definitions that claimed it
    """

    def __init__(self, key: str, names: tuple[str, ...] = ()) -> None:
        self.key = key
        self.names = names
        detail = f" (claimed by {', '.join(repr(n) for n in names)})" if names else ""
        super().__init__(f"Conflicting device definitions for key {key!r}{detail}")


class UnknownDeviceError(DeviceError):
    """One or more device keys do not resolve in the catalog.

    Attributes:
        key: The first offending key
        keys: All offending keys, in the order they were encountered
    """

    def __init__(self, key: str, *others: str) -> None:
        self.key = key
        self.keys = (key, *others)
        if others:
            listed = ", ".join(repr(k) for k in self.keys)
            super().__init__(f"Unknown devices: {listed}")
        else:
            super().__init__(f"Unknown device: {key!r}")


class InvalidDeviceFileError(DeviceError):
    """Device definition document is unreadable, malformed or has bad records."""

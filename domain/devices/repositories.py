"""Domain Port(s) for device definition I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import DeviceDefinition


class DeviceRepository(Protocol):
    """Port for obtaining parsed device definitions from external documents.

    Implementations live in infrastructure (e.g., YAML adapter). Merging the
    result into a catalog is DeviceCatalog.load's job, not the adapter's.
    """

    def load_devices(self, file_path: Path | str) -> tuple[DeviceDefinition, ...]:
        """Load and validate every device definition in a document."""
        ...

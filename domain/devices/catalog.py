"""Devices Bounded Context - DeviceCatalog.

Owned, per-run mapping from lookup key (name or alias) to DeviceDefinition.
Built-ins are seeded first, then externally supplied batches are applied in
load order with last-loaded-wins semantics per key. No I/O happens here:
callers hand in already-parsed definitions (see DeviceRepository).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from domain.devices.builtins import BUILTIN_DEVICES
from domain.devices.errors import CatalogConflictError, UnknownDeviceError
from domain.devices.value_objects import DeviceDefinition

logger = logging.getLogger(__name__)


def _check_batch(batch: list[DeviceDefinition]) -> None:
    """Reject a batch in which two different definitions claim one key.

    Identical records repeated within a batch are not a conflict.
    """
    claims: dict[str, DeviceDefinition] = {}
    for definition in batch:
        for key in definition.keys():
            previous = claims.get(key)
            if previous is not None and previous != definition:
                raise CatalogConflictError(key, (previous.name, definition.name))
            claims[key] = definition


class DeviceCatalog:
    """Known device definitions, resolvable by name or alias (case-sensitive).

    Listing order (``all()``) is the order definitions were applied in. When a
    definition is overridden by name it is dropped from its old position and
    the overriding definition takes the position of its own load. A
    definition that merely loses an alias to a newer one keeps its position,
    its name and its remaining aliases.
    """

    def __init__(self, definitions: Iterable[DeviceDefinition] = ()) -> None:
        # key -> owning definition name
        self._by_key: dict[str, str] = {}
        # name -> definition, in listing order
        self._definitions: dict[str, DeviceDefinition] = {}
        self.load(definitions)

    @classmethod
    def with_builtins(cls) -> "DeviceCatalog":
        """Return a fresh catalog seeded with the built-in devices."""
        return cls(BUILTIN_DEVICES)

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------
    def resolve(self, key: str) -> DeviceDefinition | None:
        """Return the definition registered under ``key``, or None."""
        name = self._by_key.get(key)
        if name is None:
            return None
        return self._definitions[name]

    def require(self, key: str) -> DeviceDefinition:
        """Like resolve(), but raise UnknownDeviceError for unknown keys."""
        definition = self.resolve(key)
        if definition is None:
            raise UnknownDeviceError(key)
        return definition

    def all(self) -> tuple[DeviceDefinition, ...]:
        return tuple(self._definitions.values())

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[DeviceDefinition]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._definitions)

    # -----------------------------------------------------------------------
    # Loading
    # -----------------------------------------------------------------------
    def load(self, definitions: Iterable[DeviceDefinition]) -> None:
        """Apply a batch of definitions in order, each overriding its keys.

        The batch is atomic: it is validated as a whole before anything is
        applied, and a CatalogConflictError leaves the catalog untouched.

        Raises:
            CatalogConflictError: If two different definitions in the batch
                claim the same name or alias.
        """
        batch = list(definitions)
        if not batch:
            return
        _check_batch(batch)

        by_key = dict(self._by_key)
        entries = dict(self._definitions)
        overrides = 0
        for definition in batch:
            overrides += self._apply(definition, by_key, entries)

        self._by_key = by_key
        self._definitions = entries
        logger.info(
            "Loaded %d device definitions (%d overrides); catalog has %d",
            len(batch),
            overrides,
            len(entries),
        )

    @staticmethod
    def _evict(
        name: str, by_key: dict[str, str], entries: dict[str, DeviceDefinition]
    ) -> None:
        old = entries.pop(name)
        for key in old.keys():
            if by_key.get(key) == name:
                del by_key[key]

    @classmethod
    def _apply(
        cls,
        definition: DeviceDefinition,
        by_key: dict[str, str],
        entries: dict[str, DeviceDefinition],
    ) -> int:
        """Register one definition; return how many entries it overrode."""
        overrides = 0
        if definition.name in entries:
            logger.debug("Device %r replaced by a new definition", definition.name)
            cls._evict(definition.name, by_key, entries)
            overrides += 1

        for key in definition.keys():
            owner_name = by_key.get(key)
            if owner_name is None:
                continue
            owner = entries[owner_name]
            if key == owner.name:
                # Losing the name key means losing the definition.
                logger.debug(
                    "Device %r evicted: its name is an alias of %r",
                    owner.name,
                    definition.name,
                )
                cls._evict(owner.name, by_key, entries)
            else:
                logger.debug(
                    "Alias %r moved from %r to %r", key, owner.name, definition.name
                )
                entries[owner.name] = owner.model_copy(
                    update={"aliases": tuple(a for a in owner.aliases if a != key)}
                )
                del by_key[key]
            overrides += 1

        entries[definition.name] = definition
        for key in definition.keys():
            by_key[key] = definition.name
        return overrides

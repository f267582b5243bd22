"""Link Bounded Context - Endpoint entity.

One side of a link: an ordered collection of (device, count) contributions
and the single effective power they combine into.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from domain.devices.value_objects import DeviceDefinition, DeviceKind
from domain.link.errors import InvalidCountError, PowerOverflowError
from domain.link.propagation import max_distance
from domain.link.value_objects import DeviceCount, EndpointSummary, RangeResult

GROUND_STATION = "Ground station"
RELAY = "Relay"
VESSEL = "Vessel"


def _weight(device: DeviceDefinition, anchor_power: float) -> float:
    """Weight of one instance of ``device`` relative to the strongest one.

    Any instance as strong as the anchor weighs 1 (1 ** E == 1 for every E),
    so which of several tied maxima serves as anchor does not matter.
    """
    if device.power >= anchor_power:
        return 1.0
    if not device.is_combinable:
        return 0.0
    return (device.power / anchor_power) ** device.combinability_exponent


class Endpoint:
    """Ordered (DeviceDefinition, count) contributions.

    Adding the same device twice keeps two independent entries; combination
    treats every instance as a separate contributor, so the result is the
    same as adding it once with the summed count.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[DeviceDefinition, int]] = []

    def add(self, device: DeviceDefinition, count: int = 1) -> None:
        """Append ``count`` instances of ``device``.

        Raises:
            InvalidCountError: If count is not an integer >= 1
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidCountError(count)
        self._entries.append((device, count))

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[DeviceDefinition, int]]:
        return iter(self._entries)

    def combined_power(self) -> float:
        """Effective power of all contributions.

        P_max * (1 + sum over the other instances of (P_i / P_max) ** E_i),
        where one instance of the strongest device is the anchor. The anchor
        itself weighs exactly 1, so the whole bracket is the sum of every
        instance's weight. A non-combinable device (E_i == 0) weaker than the
        anchor adds nothing.

        Raises:
            PowerOverflowError: If the result is too large for a float
        """
        if not self._entries:
            return 0.0
        anchor_power = max(device.power for device, _ in self._entries)
        if anchor_power == 0:
            return 0.0
        # fsum keeps the result independent of insertion order
        total_weight = math.fsum(
            count * _weight(device, anchor_power) for device, count in self._entries
        )
        combined = anchor_power * total_weight
        if not math.isfinite(combined):
            raise PowerOverflowError(anchor_power, total_weight)
        return combined

    def device_counts(self) -> tuple[DeviceCount, ...]:
        """Counts summed per device name, in first-seen order."""
        counts: dict[str, int] = {}
        for device, count in self._entries:
            counts[device.name] = counts.get(device.name, 0) + count
        return tuple(DeviceCount(name=n, count=c) for n, c in counts.items())

    @property
    def endpoint_type(self) -> str:
        kinds = {device.kind for device, _ in self._entries}
        if DeviceKind.GROUND in kinds:
            return GROUND_STATION
        if DeviceKind.RELAY in kinds:
            return RELAY
        return VESSEL

    def range_to(self, other: "Endpoint") -> RangeResult:
        power_from = self.combined_power()
        power_to = other.combined_power()
        return RangeResult(
            power_from=power_from,
            power_to=power_to,
            max_distance=max_distance(power_from, power_to),
        )

    def summary(self) -> EndpointSummary:
        """Immutable snapshot for reporting."""
        return EndpointSummary(
            endpoint_type=self.endpoint_type,
            devices=self.device_counts(),
            combined_power=self.combined_power(),
        )

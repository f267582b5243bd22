"""Built-in device definitions (stock game antennas and tracking stations).

Power ratings are the stock CommNet values in "range units" (metres squared
under the square-root range rule). Order here is the listing order.
"""

from __future__ import annotations

from domain.devices.value_objects import DeviceDefinition, DeviceKind

# ---------------------------------------------------------------------------
# Tracking stations
# ---------------------------------------------------------------------------
_GROUND_STATIONS = (
    DeviceDefinition(
        name="DSN Lv.1",
        aliases=("DSN1", "Tracking Station Lv.1"),
        power=2e9,
        combinability_exponent=0.75,
        kind=DeviceKind.GROUND,
    ),
    DeviceDefinition(
        name="DSN Lv.2",
        aliases=("DSN2", "Tracking Station Lv.2"),
        power=50e9,
        combinability_exponent=0.75,
        kind=DeviceKind.GROUND,
    ),
    DeviceDefinition(
        name="DSN Lv.3",
        aliases=("DSN3", "DSN", "Tracking Station Lv.3"),
        power=250e9,
        combinability_exponent=0.75,
        kind=DeviceKind.GROUND,
    ),
)

# ---------------------------------------------------------------------------
# Internal antennas (command pods, probe cores)
# ---------------------------------------------------------------------------
_INTERNAL = (
    DeviceDefinition(
        name="Command Module",
        aliases=("CM", "Command Pod"),
        power=5e3,
        combinability_exponent=1.0,
        kind=DeviceKind.INTERNAL,
    ),
    DeviceDefinition(
        name="Probe Core",
        aliases=("Probe",),
        power=5e3,
        combinability_exponent=1.0,
        kind=DeviceKind.INTERNAL,
    ),
)

# ---------------------------------------------------------------------------
# Direct antennas
# ---------------------------------------------------------------------------
_DIRECT = (
    DeviceDefinition(
        name="Communotron 16",
        aliases=("C16", "Comm 16"),
        power=500e3,
        combinability_exponent=1.0,
    ),
    DeviceDefinition(
        name="Communotron 16-S",
        aliases=("C16S", "C16-S", "Comm 16-S"),
        power=500e3,
        combinability_exponent=0.0,
    ),
    DeviceDefinition(
        name="Communotron DTS-M1",
        aliases=("DTS-M1", "DTS"),
        power=2e9,
        combinability_exponent=0.75,
    ),
    DeviceDefinition(
        name="Communotron HG-55",
        aliases=("HG-55", "HG55"),
        power=15e9,
        combinability_exponent=0.75,
    ),
    DeviceDefinition(
        name="Communotron 88-88",
        aliases=("88-88", "C88"),
        power=100e9,
        combinability_exponent=0.75,
    ),
)

# ---------------------------------------------------------------------------
# Relay antennas
# ---------------------------------------------------------------------------
_RELAY = (
    DeviceDefinition(
        name="HG-5 High Gain Antenna",
        aliases=("HG-5", "HG5"),
        power=5e6,
        combinability_exponent=0.75,
        kind=DeviceKind.RELAY,
    ),
    DeviceDefinition(
        name="RA-2 Relay Antenna",
        aliases=("RA-2", "RA2"),
        power=2e9,
        combinability_exponent=0.75,
        kind=DeviceKind.RELAY,
    ),
    DeviceDefinition(
        name="RA-15 Relay Antenna",
        aliases=("RA-15", "RA15"),
        power=15e9,
        combinability_exponent=0.75,
        kind=DeviceKind.RELAY,
    ),
    DeviceDefinition(
        name="RA-100 Relay Antenna",
        aliases=("RA-100", "RA100"),
        power=100e9,
        combinability_exponent=0.75,
        kind=DeviceKind.RELAY,
    ),
)

BUILTIN_DEVICES: tuple[DeviceDefinition, ...] = (
    *_GROUND_STATIONS,
    *_INTERNAL,
    *_DIRECT,
    *_RELAY,
)

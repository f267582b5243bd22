"""Link Bounded Context - Configuration.

Default endpoint devices, band boundaries, decay curve and landmark
distances. These are data, not algorithm: any LinkConfig whose BandTable
validates is acceptable to the runner.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from domain.link.propagation import BandTable, SmoothstepDecay
from domain.link.value_objects import DistanceBand, DistanceSection

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_FROM: tuple[int, str] = (1, "DSN Lv.3")
DEFAULT_TO: tuple[int, str] = (1, "Command Module")

DEFAULT_BAND_TABLE = BandTable(
    bands=(
        DistanceBand(label="Near", near_fraction=0.0, far_fraction=0.25),
        DistanceBand(label="Mid", near_fraction=0.25, far_fraction=0.5),
        DistanceBand(label="Far", near_fraction=0.5, far_fraction=0.75),
        DistanceBand(label="Edge", near_fraction=0.75, far_fraction=1.0),
    ),
    decay=SmoothstepDecay(),
)

# Stock system distances in meters. Moons use their orbit radius; planets use
# (|a_p - a_home|, a_p + a_home) with circular orbits, so values are approximate.
_KERBIN_SMA = 13_599_840_256.0


def _planet(label: str, sma: float) -> DistanceSection:
    return DistanceSection(
        label=label, near_m=abs(sma - _KERBIN_SMA), far_m=sma + _KERBIN_SMA
    )


STOCK_SECTIONS: tuple[DistanceSection, ...] = (
    DistanceSection(label="Kerbin - Mun", near_m=12_000_000.0, far_m=12_000_000.0),
    DistanceSection(label="Kerbin - Minmus", near_m=47_000_000.0, far_m=47_000_000.0),
    DistanceSection(label="Kerbin SOI", near_m=0.0, far_m=84_159_286.0),
    _planet("Kerbin - Moho", 5_263_138_304.0),
    _planet("Kerbin - Eve", 9_832_684_544.0),
    _planet("Kerbin - Duna", 20_726_155_264.0),
    _planet("Kerbin - Dres", 40_839_348_203.0),
    _planet("Kerbin - Jool", 68_773_560_320.0),
    _planet("Kerbin - Eeloo", 90_118_820_000.0),
)


class LinkConfig(BaseModel):
    """Everything the runner needs besides the catalog."""

    default_from: tuple[int, str] = DEFAULT_FROM
    default_to: tuple[int, str] = DEFAULT_TO
    band_table: BandTable = DEFAULT_BAND_TABLE
    sections: tuple[DistanceSection, ...] = STOCK_SECTIONS

    model_config = ConfigDict(frozen=True)

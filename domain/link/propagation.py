"""Link Bounded Context - Propagation rules.

Pure domain logic: the square-root range rule, signal decay curves and the
band table that evaluates them. NO I/O operations.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Annotated, Literal, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.link.value_objects import DistanceBand, DistanceSection, SignalEntry


# ---------------------------------------------------------------------------
# Range model
# ---------------------------------------------------------------------------
def max_distance(power_from: float, power_to: float) -> float:
    """Return the farthest distance at which two endpoints can talk.

    Range is the geometric mean of the two combined powers. Either power
    being zero means no link at all.

    Raises:
        ValueError: If either power is negative or not finite
    """
    for power in (power_from, power_to):
        if not math.isfinite(power) or power < 0:
            raise ValueError(f"power must be finite and >= 0, got {power}")
    if power_from == 0 or power_to == 0:
        return 0.0
    # power_from * power_to overflows past ~1e154
    return math.sqrt(power_from) * math.sqrt(power_to)


# ---------------------------------------------------------------------------
# Decay curves
# ---------------------------------------------------------------------------
class SmoothstepDecay(BaseModel):
    """Game rule: with x = 1 - d/D, strength = x^2 (3 - 2x).

    Flat near both ends, steepest at half range.
    """

    kind: Literal["smoothstep"] = "smoothstep"

    model_config = ConfigDict(frozen=True)

    def strength(self, ratio: ArrayLike) -> NDArray[np.float64]:
        x = 1.0 - np.clip(np.asarray(ratio, dtype=np.float64), 0.0, 1.0)
        return x * x * (3.0 - 2.0 * x)


class PiecewiseLinearDecay(BaseModel):
    """Two linear segments meeting at (knee_fraction, knee_strength).

    With knee_strength > 1 - knee_fraction the first segment is the gentle
    one and the second the steep one.
    """

    kind: Literal["piecewise"] = "piecewise"
    knee_fraction: float = Field(default=0.5, gt=0, lt=1)
    knee_strength: float = Field(default=0.75, ge=0, le=1)

    model_config = ConfigDict(frozen=True)

    def strength(self, ratio: ArrayLike) -> NDArray[np.float64]:
        # np.interp clamps outside [0, 1]: 1 before the start, 0 past the edge
        return np.interp(
            np.asarray(ratio, dtype=np.float64),
            [0.0, self.knee_fraction, 1.0],
            [1.0, self.knee_strength, 0.0],
        )


DecayCurve = Annotated[
    Union[SmoothstepDecay, PiecewiseLinearDecay], Field(discriminator="kind")
]


# ---------------------------------------------------------------------------
# Band table
# ---------------------------------------------------------------------------
class BandTable(BaseModel):
    """Ordered distance bands partitioning [0, 1] plus the decay curve.

    Invariants:
        - at least one band
        - first band starts at 0, last band ends at 1
        - far_fraction of band i == near_fraction of band i + 1 (exact)
    """

    bands: tuple[DistanceBand, ...] = Field(min_length=1)
    decay: DecayCurve = Field(default_factory=SmoothstepDecay)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_partition(self) -> "BandTable":
        if self.bands[0].near_fraction != 0:
            raise ValueError(
                f"First band must start at 0, got {self.bands[0].near_fraction}"
            )
        if self.bands[-1].far_fraction != 1:
            raise ValueError(
                f"Last band must end at 1, got {self.bands[-1].far_fraction}"
            )
        for prev, band in zip(self.bands, self.bands[1:]):
            if prev.far_fraction != band.near_fraction:
                raise ValueError(
                    f"Bands {prev.label!r} and {band.label!r} leave a gap or overlap: "
                    f"{prev.far_fraction} != {band.near_fraction}"
                )
        return self

    def labels(self) -> tuple[str, ...]:
        return tuple(b.label for b in self.bands)

    def _strengths(
        self, distances: NDArray[np.float64], max_distance: float
    ) -> list[float | None]:
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        if np.any(distances < 0):
            raise ValueError("distance must be >= 0")
        if max_distance == 0:
            return [None] * len(distances)
        return [float(s) for s in self.decay.strength(distances / max_distance)]

    def strength_at(self, distance: float, max_distance: float) -> float | None:
        """Signal strength at ``distance`` for a link of range ``max_distance``.

        Returns None when max_distance is 0 (no link at any distance). Past
        max_distance the signal is lost and strength is 0.

        Raises:
            ValueError: If distance or max_distance is negative
        """
        return self._strengths(np.array([distance], dtype=np.float64), max_distance)[0]

    def evaluate(self, max_distance: float) -> tuple[SignalEntry, ...]:
        """Return strengths at the near and far edge of every band, in order."""
        near = np.array([b.near_fraction for b in self.bands]) * max_distance
        far = np.array([b.far_fraction for b in self.bands]) * max_distance
        return _entries(
            self.labels(),
            self._strengths(near, max_distance),
            self._strengths(far, max_distance),
        )

    def evaluate_sections(
        self, sections: Sequence[DistanceSection], max_distance: float
    ) -> tuple[SignalEntry, ...]:
        """Return strengths at the ends of absolute-distance sections."""
        if not sections:
            return ()
        near = np.array([s.near_m for s in sections], dtype=np.float64)
        far = np.array([s.far_m for s in sections], dtype=np.float64)
        return _entries(
            tuple(s.label for s in sections),
            self._strengths(near, max_distance),
            self._strengths(far, max_distance),
        )


def _entries(
    labels: Sequence[str],
    at_near: Sequence[float | None],
    at_far: Sequence[float | None],
) -> tuple[SignalEntry, ...]:
    return tuple(
        SignalEntry(label=label, strength_at_near=n, strength_at_far=f)
        for label, n, f in zip(labels, at_near, at_far)
    )

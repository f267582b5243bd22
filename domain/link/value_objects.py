"""Link Bounded Context - Value Objects.

Immutable data structures for distances, ranges and signal readings.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Strength is a fraction in [0, 1]; None means "not applicable" (no link).
Strength = Annotated[float, Field(ge=0, le=1)] | None


# ---------------------------------------------------------------------------
# Distance bands and sections
# ---------------------------------------------------------------------------
class DistanceBand(BaseModel):
    """Named slice of [0, max_distance], expressed as fractions (Value Object).

    Invariants:
        - 0 <= near_fraction < far_fraction <= 1
    """

    label: str = Field(min_length=1)
    near_fraction: float = Field(ge=0, le=1)
    far_fraction: float = Field(ge=0, le=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> "DistanceBand":
        if not (self.near_fraction < self.far_fraction):
            raise ValueError(
                f"Band {self.label!r}: near_fraction={self.near_fraction} must be "
                f"< far_fraction={self.far_fraction}"
            )
        return self


class DistanceSection(BaseModel):
    """Named absolute distance range in meters, e.g. "Kerbin - Mun".

    Invariants:
        - 0 <= near_m <= far_m
    """

    label: str = Field(min_length=1)
    near_m: float = Field(ge=0)
    far_m: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> "DistanceSection":
        if self.near_m > self.far_m:
            raise ValueError(
                f"Section {self.label!r}: near_m={self.near_m} > far_m={self.far_m}"
            )
        return self


class SignalEntry(BaseModel):
    """Signal strength at the near and far edge of one band or section."""

    label: str
    strength_at_near: Strength = None
    strength_at_far: Strength = None

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Range
# ---------------------------------------------------------------------------
class RangeResult(BaseModel):
    """Maximum communication distance between two combined powers."""

    power_from: float = Field(ge=0)
    power_to: float = Field(ge=0)
    max_distance: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def has_link(self) -> bool:
        return self.max_distance > 0


# ---------------------------------------------------------------------------
# Run output
# ---------------------------------------------------------------------------
class DeviceCount(BaseModel):
    """A device name with how many of it an endpoint carries."""

    name: str
    count: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)


class EndpointSummary(BaseModel):
    """Snapshot of an endpoint taken when range computation begins."""

    endpoint_type: str
    devices: tuple[DeviceCount, ...] = Field(min_length=1)
    combined_power: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class LinkReport(BaseModel):
    """Everything a report formatter needs about one from/to pair."""

    from_endpoint: EndpointSummary
    to_endpoint: EndpointSummary
    range: RangeResult
    signal_table: tuple[SignalEntry, ...]
    landmarks: tuple[SignalEntry, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def max_distance(self) -> float:
        return self.range.max_distance

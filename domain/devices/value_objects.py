"""Devices Bounded Context - Value Objects.

Immutable device definitions. All validation occurs at construction time via
Pydantic, so an invalid DeviceDefinition cannot be instantiated.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class DeviceKind(str, Enum):
    """Role of a device; drives the endpoint type label only."""

    GROUND = "ground"  # Tracking station dish
    RELAY = "relay"  # Relay antenna (can forward signal)
    DIRECT = "direct"  # Direct-to-home antenna
    INTERNAL = "internal"  # Built into a command pod or probe core


class DeviceDefinition(BaseModel):
    """A single antenna-like device (Value Object).

    Invariants:
        - name is non-empty
        - aliases are non-empty, distinct, and never repeat the name
        - power is finite and >= 0
        - combinability_exponent in [0, 1]

    Pydantic frozen models compare by value, so two records loaded from
    different sources with identical fields are equal.
    """

    name: str = Field(min_length=1)
    aliases: tuple[str, ...] = ()
    power: float = Field(ge=0)
    combinability_exponent: float = Field(ge=0, le=1)
    kind: DeviceKind = DeviceKind.DIRECT

    model_config = ConfigDict(frozen=True)

    @field_validator("power")
    @classmethod
    def validate_power_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"power must be finite, got {value}")
        return value

    @model_validator(mode="after")
    def validate_aliases(self) -> "DeviceDefinition":
        seen: set[str] = set()
        for alias in self.aliases:
            if not alias:
                raise ValueError(f"{self.name!r}: aliases cannot be empty")
            if alias == self.name:
                raise ValueError(f"{self.name!r}: alias repeats the device name")
            if alias in seen:
                raise ValueError(f"{self.name!r}: duplicate alias {alias!r}")
            seen.add(alias)
        return self

    def keys(self) -> tuple[str, ...]:
        """Return every lookup key: the name first, then aliases."""
        return (self.name, *self.aliases)

    @property
    def is_combinable(self) -> bool:
        return self.combinability_exponent > 0

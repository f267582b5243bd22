"""Link Bounded Context - Error Hierarchy.

Custom exceptions for endpoint construction and link evaluation.
"""

from __future__ import annotations


class LinkError(Exception):
    """Base error for link operations."""


class InvalidCountError(LinkError):
    """Device count for an endpoint contribution is not a positive integer.

    Attributes:
        count: The offending count
    """

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"Device count must be a positive integer, got {count!r}")


class InvalidSpecifierError(LinkError):
    """Raw device specifier token has the wrong shape.

    Attributes:
        token: The offending raw token
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Device specifier should be [<COUNT>:]<NAME>, got {token!r}"
        )


class EmptyEndpointError(LinkError):
    """An endpoint has no devices even after defaulting."""

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f"{side!r} endpoint has no devices")


class PowerOverflowError(LinkError):
    """Combined power of an endpoint is too large to represent as a float.

    Attributes:
        anchor_power: Power of the strongest device on the endpoint
        total_weight: Sum of all instance weights
    """

    def __init__(self, anchor_power: float, total_weight: float) -> None:
        self.anchor_power = anchor_power
        self.total_weight = total_weight
        super().__init__(
            f"Combined power overflows: {anchor_power:g} x {total_weight:g}"
        )

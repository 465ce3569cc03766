"""Angles in degrees with wrap-around on read."""

import math
from dataclasses import dataclass

from .config import HorizontalDirection

RADIANS_RATE = math.pi / 180


@dataclass(frozen=True, order=True)
class Angle:
    """A direction or rotation.

    The raw degree value is kept as given so that arithmetic stays
    consistent, e.g. ``(a + b) - b`` reads back as ``a``. Comparisons use
    the raw value too. Only :attr:`degrees` and :attr:`radians` normalize.
    """

    raw: float = 0.0

    @classmethod
    def from_degrees(
        cls, value: float, horizontal: HorizontalDirection = HorizontalDirection.RIGHT
    ) -> "Angle":
        """Build a direction for the given horizontal convention.

        Left-positive directions are turned half a circle so that line and
        arc math always runs in the right-handed internal frame.
        """
        if horizontal == HorizontalDirection.LEFT:
            value += 180
        return cls(value)

    @property
    def degrees(self) -> float:
        """Normalized value in [0, 360), or NaN for a non-finite raw value."""
        return (self.raw % 360.0 + 360.0) % 360.0

    @property
    def radians(self) -> float:
        return self.degrees * RADIANS_RATE

    def __float__(self) -> float:
        return self.degrees

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.raw + other.raw)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.raw - other.raw)

    def __neg__(self) -> "Angle":
        return Angle(-self.raw)

    def __mul__(self, scalar: float) -> "Angle":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Angle(self.raw * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Angle":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            # IEEE division: x / 0 is a signed infinity, 0 / 0 is NaN
            if self.raw == 0 or math.isnan(self.raw):
                return Angle(math.nan)
            return Angle(math.copysign(math.inf, self.raw) * math.copysign(1.0, scalar))
        return Angle(self.raw / scalar)


Angle.ZERO = Angle(0.0)

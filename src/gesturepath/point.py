"""Immutable 2D points rounded to a fixed number of decimals."""

import math
from dataclasses import dataclass

from .angle import Angle

DEFAULT_PRECISION = 4


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def rounded(cls, x: float, y: float, precision: int = DEFAULT_PRECISION) -> "Point":
        return cls(round(x, precision), round(y, precision))

    @classmethod
    def polar(
        cls,
        angle: Angle,
        radius: float,
        origin: "Point | None" = None,
        precision: int = DEFAULT_PRECISION,
    ) -> "Point":
        """Point at ``radius`` from ``origin`` (default: zero) in direction ``angle``."""
        origin = origin or ZERO
        return cls.rounded(
            math.cos(angle.radians) * radius + origin.x,
            math.sin(angle.radians) * radius + origin.y,
            precision,
        )

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


ZERO = Point(0.0, 0.0)

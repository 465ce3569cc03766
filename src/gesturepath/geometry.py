"""Connected polyline geometry handed to renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import numpy.typing as npt

Coordinate = tuple[float, float]


@dataclass(frozen=True)
class LineSegment:
    """A straight segment between two output coordinates."""

    start: Coordinate
    end: Coordinate

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


@dataclass
class Polyline:
    """Points joined in order by straight segments, starting at the first point."""

    points: list[Coordinate] = field(default_factory=list)

    @property
    def start(self) -> Optional[Coordinate]:
        return self.points[0] if self.points else None

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def segments(self) -> list[LineSegment]:
        return [LineSegment(a, b) for a, b in zip(self.points[:-1], self.points[1:])]

    @property
    def length(self) -> float:
        if len(self.points) < 2:
            return 0.0
        deltas = np.diff(self.to_array(), axis=0)
        return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())

    def bounds(self) -> Optional[tuple[float, float, float, float]]:
        """(min_x, min_y, max_x, max_y), or None for an empty polyline."""
        if self.is_empty:
            return None
        arr = self.to_array()
        min_x, min_y = arr.min(axis=0)
        max_x, max_y = arr.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.points, dtype=np.float64).reshape(-1, 2)

"""Turtle graphics for gesture paths."""

import logging

from .angle import Angle
from .config import DEFAULT, Options
from .geometry import Polyline
from .point import ZERO, Point

logger = logging.getLogger(__name__)

# Equal angular steps per arc, whatever its sweep or radius
ARC_STEPS = 180


class PathBuilder:
    """Turtle graphics state machine.

    Tracks the pen location, the heading and every vertex visited, all in
    internal (right-handed, y-up) coordinates. Operations return the builder
    so calls can be chained::

        PathBuilder().draw_line(4, 90).draw_line(1, 0).draw_arc_relative(1, 90, -180)

    Plain numbers are degrees in the caller's convention. :class:`Angle`
    instances are taken as internal angles and used unchanged.

    Nothing is validated: NaN or infinite arguments end up as NaN or
    infinite coordinates.
    """

    def __init__(self, options: Options | None = None):
        self.options = options or DEFAULT
        self._location = ZERO
        self._heading = Angle.ZERO
        self._path: list[Point] = [self._location]

    @property
    def location(self) -> Point:
        return self._location

    @property
    def heading(self) -> Angle:
        return self._heading

    @property
    def path(self) -> list[Point]:
        """Internal vertices, before projection."""
        return list(self._path)

    @property
    def drawing_path(self) -> list[tuple[float, float]]:
        """Vertices in output coordinates."""
        return [self.options.project(p) for p in self._path]

    def _direction(self, angle: Angle | float) -> Angle:
        if isinstance(angle, Angle):
            return angle
        return Angle.from_degrees(angle, self.options.horizontal)

    def _turn(self, angle: Angle | float) -> Angle:
        if isinstance(angle, Angle):
            return angle
        return Angle(angle)

    def _polar(self, angle: Angle, radius: float, origin: Point | None = None) -> Point:
        return Point.polar(angle, radius, origin, self.options.precision)

    def forward(self, length: float) -> "PathBuilder":
        """Draw ``length`` units along the current heading."""
        end = self._polar(self._heading, length, self._location)
        # Both ends go in, so each call also reads as a standalone segment
        self._path.extend([self._location, end])
        self._location = end
        return self

    def draw_line(self, length: float, angle: Angle | float) -> "PathBuilder":
        """Turn to the absolute direction ``angle`` and draw forward."""
        self._heading = self._direction(angle)
        logger.debug("line length=%s heading=%s", length, self._heading.degrees)
        return self.forward(length)

    def rotate(self, angle: Angle | float) -> "PathBuilder":
        self._heading = self._heading + self._turn(angle)
        return self

    def draw_arc_relative(
        self, radius: float, relative_start: Angle | float, sweep: Angle | float
    ) -> "PathBuilder":
        """Rotate by ``relative_start``, then draw an arc starting at the new heading."""
        self._heading = self._heading + self._turn(relative_start)
        return self.draw_arc(radius, self._heading, sweep)

    def draw_arc(
        self, radius: float, start: Angle | float, sweep: Angle | float
    ) -> "PathBuilder":
        """Draw an arc through the current location.

        ``start`` is the angle, seen from the arc's center, of the current
        location; the center is placed accordingly.
        """
        start = self._direction(start)
        first = self._polar(start, radius)
        center = Point.rounded(
            self._location.x - first.x,
            self._location.y - first.y,
            self.options.precision,
        )
        return self._draw_arc_about(center, radius, start, self._turn(sweep))

    def _draw_arc_about(
        self, center: Point, radius: float, start: Angle, sweep: Angle
    ) -> "PathBuilder":
        if sweep == Angle.ZERO:
            return self

        logger.debug(
            "arc center=(%s, %s) radius=%s start=%s sweep=%s",
            center.x, center.y, radius, start.raw, sweep.raw,
        )
        step = sweep / ARC_STEPS
        for i in range(ARC_STEPS + 1):
            self._path.append(self._polar(start + i * step, radius, center))

        end = start + sweep
        self._location = self._polar(end, radius, center)
        # Exit heading is the tangent in the direction of travel
        self._heading = end + Angle(90 if sweep > Angle.ZERO else -90)
        return self

    def to_polyline(self) -> Polyline:
        return Polyline(self.drawing_path)

    def __repr__(self) -> str:
        return (
            f"PathBuilder(location=({self._location.x}, {self._location.y}), "
            f"heading={self._heading.degrees}, points={len(self._path)})"
        )

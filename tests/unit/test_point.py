"""Tests for Point construction and rounding."""

import dataclasses

import pytest

from gesturepath.angle import Angle
from gesturepath.point import ZERO, Point


class TestRounding:
    def test_rounds_at_construction(self) -> None:
        p = Point.rounded(1.234567, 2.345678)
        assert p == Point(1.2346, 2.3457)

    @pytest.mark.parametrize("precision", [0, 1, 2, 3, 4, 6])
    def test_coordinates_hold_rounded_values(self, precision) -> None:
        p = Point.polar(Angle(37.5), 3.14159265, Point(0.123456789, -9.87654321), precision)
        assert round(p.x, precision) == p.x
        assert round(p.y, precision) == p.y

    def test_precision_zero(self) -> None:
        assert Point.polar(Angle(45), 1, precision=0) == Point(1.0, 1.0)

    def test_zero_point(self) -> None:
        assert ZERO == Point(0.0, 0.0)


class TestPolar:
    def test_about_origin(self) -> None:
        assert Point.polar(Angle(90), 2) == Point(0.0, 2.0)
        assert Point.polar(Angle(180), 3) == Point(-3.0, 0.0)

    def test_about_other_point(self) -> None:
        assert Point.polar(Angle(0), 3, Point(1, 1)) == Point(4.0, 1.0)

    def test_nan_radius_propagates(self) -> None:
        p = Point.polar(Angle(30), float("nan"))
        assert p.x != p.x and p.y != p.y


class TestValueSemantics:
    def test_immutable(self) -> None:
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 3.0

    def test_equality_and_hash(self) -> None:
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert len({Point(1.0, 2.0), Point(1.0, 2.0)}) == 1

    def test_distance(self) -> None:
        assert ZERO.distance_to(Point(3, 4)) == pytest.approx(5.0)
        assert Point(3, 4).as_tuple() == (3, 4)

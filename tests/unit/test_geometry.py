"""Unit tests for wall geometry helpers.

These tests verify:
- Endpoint computation from centre, length and rotation
- The endpoint invariant (length and midpoint) under arbitrary poses
- Anchor inversion used by rotation
- Angle normalisation in radians and degrees
"""

import math

import pytest

from wallplanner.domain.services.geometry import (
    center_from_anchor,
    clamp,
    degrees_to_rotation,
    direction,
    distance,
    endpoint,
    normalize_angle,
    normalize_degrees,
    rotation_to_degrees,
    screen_normal,
    wall_endpoints,
)
from wallplanner.domain.value_objects import Endpoint, WorldPoint


class TestWallEndpoints:
    """Tests for wall_endpoints()."""

    def test_horizontal_wall(self) -> None:
        """A 400 cm wall on the origin ends at -200 and +200 on X."""
        a, b = wall_endpoints(0, 0, 400, 0)
        assert a == WorldPoint(-200, 0)
        assert b == WorldPoint(200, 0)

    def test_quarter_turn_points_along_z(self) -> None:
        a, b = wall_endpoints(10, 20, 100, math.pi / 2)
        assert a.x == pytest.approx(10)
        assert a.z == pytest.approx(-30)
        assert b.x == pytest.approx(10)
        assert b.z == pytest.approx(70)

    @pytest.mark.parametrize("width", [0, -50])
    def test_non_positive_width_collapses_to_centre(self, width: float) -> None:
        a, b = wall_endpoints(5, 7, width, 1.2)
        assert a == WorldPoint(5, 7)
        assert b == WorldPoint(5, 7)

    @pytest.mark.parametrize(
        "x,z,width,theta",
        [
            (0, 0, 400, 0.0),
            (-123.4, 56.7, 250, 0.7),
            (300, -300, 1, -2.9),
            (12, 34, 600, 10.0),
        ],
    )
    def test_endpoint_invariant(self, x: float, z: float, width: float, theta: float) -> None:
        """distance(a, b) == width and the midpoint is the centre."""
        a, b = wall_endpoints(x, z, width, theta)
        assert distance(a.x, a.z, b.x, b.z) == pytest.approx(width)
        assert (a.x + b.x) / 2 == pytest.approx(x)
        assert (a.z + b.z) / 2 == pytest.approx(z)

    def test_single_endpoint_matches_pair(self) -> None:
        a, b = wall_endpoints(1, 2, 80, 0.4)
        assert endpoint(1, 2, 80, 0.4, Endpoint.A) == a
        assert endpoint(1, 2, 80, 0.4, Endpoint.B) == b


class TestCenterFromAnchor:
    """Tests for center_from_anchor()."""

    @pytest.mark.parametrize("which", [Endpoint.A, Endpoint.B])
    @pytest.mark.parametrize("theta", [0.0, 0.5, math.pi / 2, -2.0])
    def test_inverse_of_endpoint(self, which: Endpoint, theta: float) -> None:
        anchor = WorldPoint(-200, 35)
        center = center_from_anchor(anchor, 300, theta, which)
        placed = endpoint(center.x, center.z, 300, theta, which)
        assert placed.x == pytest.approx(anchor.x)
        assert placed.z == pytest.approx(anchor.z)

    def test_endpoint_a_centre_lies_ahead(self) -> None:
        center = center_from_anchor(WorldPoint(0, 0), 200, 0.0, Endpoint.A)
        assert center == WorldPoint(100, 0)


class TestDirections:
    def test_direction_is_unit(self) -> None:
        tx, tz = direction(1.1)
        assert math.hypot(tx, tz) == pytest.approx(1)

    def test_screen_normal_is_perpendicular(self) -> None:
        tx, tz = direction(0.8)
        nx, ny = screen_normal(0.8)
        assert tx * nx + tz * ny == pytest.approx(0)

    def test_screen_normal_of_horizontal_wall_points_up(self) -> None:
        nx, ny = screen_normal(0.0)
        assert nx == pytest.approx(0)
        assert ny == pytest.approx(-1)


class TestAngles:
    """Tests for angle normalisation and degree conversion."""

    @pytest.mark.parametrize(
        "theta,expected",
        [
            (0.0, 0.0),
            (math.pi, math.pi),
            (-math.pi, math.pi),
            (3 * math.pi / 2, -math.pi / 2),
            (7.0, 7.0 - 2 * math.pi),
            (-0.25, -0.25),
        ],
    )
    def test_normalize_angle(self, theta: float, expected: float) -> None:
        assert normalize_angle(theta) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "degrees,expected",
        [(0, 0), (360, 0), (-90, 270), (725, 5), (359.5, 359.5)],
    )
    def test_normalize_degrees(self, degrees: float, expected: float) -> None:
        assert normalize_degrees(degrees) == pytest.approx(expected)

    def test_rotation_to_degrees_wraps_negative(self) -> None:
        assert rotation_to_degrees(-math.pi / 2) == pytest.approx(270)

    @pytest.mark.parametrize("degrees", [0, 45, 90, 270, 359])
    def test_degree_entry_reads_back(self, degrees: float) -> None:
        assert rotation_to_degrees(degrees_to_rotation(degrees)) == pytest.approx(degrees)

    def test_degree_entry_normalises_first(self) -> None:
        assert degrees_to_rotation(-90) == pytest.approx(3 * math.pi / 2)


def test_clamp() -> None:
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2

import math

import pytest

from apex_attendance.core.constants import EARTH_RADIUS_METERS
from apex_attendance.geo.geofence import Position, distance_meters, within_radius


@pytest.mark.parametrize(
    "p",
    [
        Position(0.0, 0.0),
        Position(37.5665, 126.9780),
        Position(-33.8688, 151.2093),
        Position(89.9, -179.9),
    ],
)
def test_distance_to_self_is_zero(p):
    assert distance_meters(p, p) == 0


@pytest.mark.parametrize(
    "p,q",
    [
        (Position(37.5665, 126.9780), Position(37.5700, 126.9780)),
        (Position(37.5665, 126.9780), Position(35.1796, 129.0756)),
        (Position(51.5074, -0.1278), Position(40.7128, -74.0060)),
        (Position(-10.0, 179.5), Position(10.0, -179.5)),
    ],
)
def test_distance_is_symmetric(p, q):
    assert distance_meters(p, q) == pytest.approx(distance_meters(q, p), rel=1e-6)


def test_distance_along_meridian_matches_arc_length():
    # 0.0035 degrees of latitude on a 6,371 km sphere.
    d = distance_meters(Position(37.5665, 126.9780), Position(37.5700, 126.9780))
    expected = EARTH_RADIUS_METERS * math.radians(0.0035)
    assert d == pytest.approx(expected, rel=1e-6)
    assert 380 < d < 395


def test_one_degree_of_longitude_on_equator():
    d = distance_meters(Position(0.0, 0.0), Position(0.0, 1.0))
    assert d == pytest.approx(EARTH_RADIUS_METERS * math.pi / 180, rel=1e-9)


RADII = [1, 10, 50, 100, 250, 500, 1000, 5000]


def _point_north_of(center, meters):
    return Position(center.latitude + math.degrees(meters / EARTH_RADIUS_METERS), center.longitude)


@pytest.mark.parametrize("radius", RADII)
def test_within_radius_is_inclusive_at_boundary(radius):
    center = Position(37.5665, 126.9780)
    edge = _point_north_of(center, radius)

    assert distance_meters(center, edge) == pytest.approx(radius, abs=1e-6)
    assert within_radius(edge, center, radius)


@pytest.mark.parametrize("radius", RADII)
def test_point_just_past_boundary_is_outside(radius):
    center = Position(37.5665, 126.9780)
    assert not within_radius(_point_north_of(center, radius + 0.01), center, radius)

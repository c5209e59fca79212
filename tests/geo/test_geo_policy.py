from __future__ import annotations

import math

import pytest

from src.geo_attendance.geo_attendance.core.constants import EARTH_RADIUS_KM
from src.geo_attendance.geo_attendance.geo.model import AreaConfig, Coordinate
from src.geo_attendance.geo_attendance.geo.policy import distance_km, is_in_range, tag_location

OFFICE = Coordinate(lat=13.7563, lng=100.5018)
POINTS = [
    OFFICE,
    Coordinate(lat=13.7650, lng=100.5380),
    Coordinate(lat=-33.8688, lng=151.2093),
    Coordinate(lat=51.5074, lng=-0.1278),
    Coordinate(lat=0.0, lng=0.0),
]


@pytest.mark.parametrize("p", POINTS)
def test_distance_to_itself_is_zero(p):
    assert distance_km(p, p) == 0


@pytest.mark.parametrize("p1", POINTS)
@pytest.mark.parametrize("p2", POINTS)
def test_distance_is_symmetric(p1, p2):
    assert distance_km(p1, p2) == pytest.approx(distance_km(p2, p1))


def test_one_degree_of_latitude_is_about_111_km():
    assert distance_km(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0)) == pytest.approx(111.195, abs=0.01)


def test_in_range_boundary_is_inclusive():
    point = Coordinate(lat=1.0, lng=0.0)
    center = Coordinate(lat=0.0, lng=0.0)
    exact = distance_km(point, center)

    assert is_in_range(point, AreaConfig(center=center, radius_km=exact))
    assert not is_in_range(point, AreaConfig(center=center, radius_km=exact - 0.001))


def test_growing_radius_never_leaves_range():
    point = Coordinate(lat=13.7600, lng=100.5050)
    was_inside = False
    for radius in [0.0, 0.1, 0.3, 0.5, 1.0, 5.0, 50.0]:
        inside = is_in_range(point, AreaConfig(center=OFFICE, radius_km=radius))
        assert inside or not was_inside
        was_inside = inside
    assert was_inside


def test_tag_location_marks_inside_flag():
    area = AreaConfig(center=OFFICE, radius_km=0.5)

    near = tag_location(13.7565, 100.5020, area)
    far = tag_location(13.80, 100.60, area)

    assert near.inside is True
    assert far.inside is False
    assert (far.lat, far.lng) == (13.80, 100.60)


def test_antipodal_points_are_half_the_circumference():
    p1 = Coordinate(lat=69.51232454868148, lng=86.5812282599507)
    p2 = Coordinate(lat=-69.51232454868148, lng=86.5812282599507 - 180)

    assert distance_km(p1, p2) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-6)
    assert not is_in_range(p1, AreaConfig(center=p2, radius_km=1.0))

import math

import pytest

from worldle.haversine import EARTH_RADIUS_M, haversine


def test_same_point_is_zero():
    assert haversine(48.85, 2.35, 48.85, 2.35) == pytest.approx(0.0)


def test_quarter_of_equator():
    assert haversine(0, 0, 0, 90) == pytest.approx(math.pi / 2 * EARTH_RADIUS_M)


def test_one_radian_of_equator_is_earth_radius():
    assert haversine(0, 0, 0, math.degrees(1.0)) == pytest.approx(6371e3)


def test_pole_to_pole_is_half_circumference():
    assert haversine(90, 0, -90, 0) == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_symmetric():
    there = haversine(51.5, -0.12, 40.7, -74.0)
    back = haversine(40.7, -74.0, 51.5, -0.12)
    assert there == pytest.approx(back)
    assert there > 0


def test_triangle_inequality():
    direct = haversine(0, 0, 30, 30)
    via = haversine(0, 0, 15, 10) + haversine(15, 10, 30, 30)
    assert direct <= via + 1e-6
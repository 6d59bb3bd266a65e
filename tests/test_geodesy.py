"""Mini README: Tests for the haversine distance helpers.

Covers symmetry, the identity case, known reference distances and the
hemisphere formatting used by the waypoint table.
"""

from __future__ import annotations

import math

import pytest

from missioncomposer.geodesy import (
    EARTH_RADIUS_M,
    Coordinate,
    distance_between,
    distance_meters,
    format_coordinates,
)

ONE_DEGREE_M = EARTH_RADIUS_M * math.pi / 180


@pytest.mark.parametrize(
    "a, b",
    [
        ((22.6, 88.8), (22.7, 88.9)),
        ((-33.86, 151.2), (51.5, -0.12)),
        ((0.0, 179.9), (0.0, -179.9)),
    ],
)
def test_distance_is_symmetric(a, b) -> None:
    assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))


def test_distance_to_self_is_zero() -> None:
    assert distance_meters((51.5, -0.12), (51.5, -0.12)) == 0.0


def test_quarter_equator_matches_reference_value() -> None:
    """(0°N, 0°E) to (0°N, 90°E) is a quarter of the equator."""

    assert distance_meters((0.0, 0.0), (0.0, 90.0)) == pytest.approx(10_007_543, abs=1)


def test_one_degree_of_latitude() -> None:
    assert distance_meters((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111_195, abs=1)


def test_antipodal_points_do_not_produce_nan() -> None:
    distance = distance_meters((0.0, 0.0), (0.0, 180.0))
    assert not math.isnan(distance)
    assert distance == pytest.approx(EARTH_RADIUS_M * math.pi)


def test_distance_between_swaps_lon_lat_order() -> None:
    """``Coordinate`` values are (lon, lat); the wrapper must swap them."""

    a = Coordinate(longitude=0.0, latitude=0.0)
    b = Coordinate(longitude=0.0, latitude=1.0)
    assert distance_between(a, b) == pytest.approx(ONE_DEGREE_M)
    assert distance_between(a, b) == pytest.approx(distance_meters((0.0, 0.0), (1.0, 0.0)))


def test_format_coordinates_uses_hemisphere_suffixes() -> None:
    assert format_coordinates((88.8, 22.6)) == "22.60000000°N, 88.80000000°E"
    assert format_coordinates((-0.5, -12.25), decimals=2) == "12.25°S, 0.50°W"

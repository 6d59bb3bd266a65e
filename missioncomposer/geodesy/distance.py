"""Mini README: Great-circle distance on a spherical Earth.

Structure:
    * Coordinate - ``(longitude, latitude)`` pair in WGS84 decimal degrees.
    * distance_meters - haversine distance taking latitude-first pairs.
    * distance_between - convenience wrapper accepting ``Coordinate`` values.
    * format_coordinates - hemisphere-suffixed display string for tables.

Drawn geometry arrives in ``(lon, lat)`` order while the haversine formula is
written latitude first. ``distance_between`` is the only place the axes are
swapped so callers never do it by hand.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

EARTH_RADIUS_M = 6_371_000.0


class Coordinate(NamedTuple):
    """Geographic position as ``(longitude, latitude)`` in decimal degrees."""

    longitude: float
    latitude: float


def distance_meters(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the haversine distance in metres between two ``(lat, lon)`` pairs."""

    lat1, lon1 = a
    lat2, lon2 = b
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    h = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push h fractionally outside [0, 1].
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c


def distance_between(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the distance in metres between two ``(lon, lat)`` coordinates."""

    return distance_meters((a[1], a[0]), (b[1], b[0]))


def format_coordinates(coordinate: Sequence[float], decimals: int = 8) -> str:
    """Render a coordinate as ``'22.60000000°N, 88.80000000°E'``."""

    lon, lat = coordinate[0], coordinate[1]
    lat_dir = "N" if lat >= 0 else "S"
    lon_dir = "E" if lon >= 0 else "W"
    return f"{abs(lat):.{decimals}f}°{lat_dir}, {abs(lon):.{decimals}f}°{lon_dir}"

"""Mini README: Geodesic helpers for route composition.

Exports the haversine distance function, the ``Coordinate`` value type and the
operator facing coordinate formatter.
"""

from .distance import (
    EARTH_RADIUS_M,
    Coordinate,
    distance_between,
    distance_meters,
    format_coordinates,
)

__all__ = [
    "EARTH_RADIUS_M",
    "Coordinate",
    "distance_between",
    "distance_meters",
    "format_coordinates",
]

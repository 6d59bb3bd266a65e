"""Mini README: GeoJSON helper utilities for the mission composer.

Structure:
    * line_feature / polygon_feature - wrap coordinate lists as Features.
    * feature_collection - bundle Features for the map layer.
    * coordinates_from_geojson - validate a drawn geometry payload.

Keeping the helpers isolated avoids importing web framework dependencies when
running unit tests or projecting geometry outside the interface.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union


def _positions(coordinates: Iterable[Sequence[float]]) -> List[List[float]]:
    return [[float(point[0]), float(point[1])] for point in coordinates]


def line_feature(coordinates: Iterable[Sequence[float]]) -> Dict[str, Any]:
    """Return a LineString Feature from ``(lon, lat)`` coordinates."""

    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": _positions(coordinates)},
        "properties": {},
    }


def polygon_feature(ring: Iterable[Sequence[float]]) -> Dict[str, Any]:
    """Return a single-ring Polygon Feature from ``(lon, lat)`` coordinates."""

    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [_positions(ring)]},
        "properties": {},
    }


def feature_collection(features: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


def coordinates_from_geojson(
    payload: Union[str, Dict[str, Any]],
) -> Tuple[str, List[Tuple[float, float]]]:
    """Validate a LineString/Polygon payload and return ``(type, coordinates)``.

    Polygons yield their outer ring only; holes have no meaning for a detour.
    """

    if isinstance(payload, str):
        try:
            geojson = json.loads(payload)
        except json.JSONDecodeError as error:
            raise ValueError("GeoJSON payload is invalid JSON") from error
    else:
        geojson = payload

    if not isinstance(geojson, dict):
        raise ValueError("GeoJSON payload must be an object")

    if geojson.get("type") == "Feature":
        geometry = geojson.get("geometry") or {}
    else:
        geometry = geojson

    geometry_type = geometry.get("type")
    if geometry_type not in {"LineString", "Polygon"}:
        raise ValueError("Only LineString and Polygon GeoJSON payloads are supported")

    coordinates = geometry.get("coordinates")
    if not coordinates:
        raise ValueError(f"{geometry_type} coordinates are required")

    points = coordinates[0] if geometry_type == "Polygon" else coordinates
    try:
        parsed = [(float(point[0]), float(point[1])) for point in points]
    except (TypeError, ValueError, IndexError) as error:
        raise ValueError(f"{geometry_type} contains malformed positions") from error
    return geometry_type, parsed

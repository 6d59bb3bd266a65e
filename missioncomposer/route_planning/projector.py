"""Mini README: Derive drawable geometry from a waypoint sequence.

Structure:
    * ProjectedGeometry - line strings and polygons handed to the renderer.
    * project - walk a ``WaypointSequence`` and emit the minimal primitives.

Each polygon block becomes one polygon. Runs of consecutive points become
line strings, bridged across polygons by seeding the next line with the
polygon's exit vertex.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..geodesy import Coordinate
from ..logging_utils import get_logger
from ..utils.geojson import feature_collection, line_feature, polygon_feature
from .sequence import PointElement, PolygonBlock, WaypointSequence

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class ProjectedGeometry:
    """Geographic primitives ready for the rendering collaborator."""

    lines: List[List[Coordinate]] = field(default_factory=list)
    polygons: List[List[Coordinate]] = field(default_factory=list)

    def to_geojson(self) -> Dict:
        """Return a GeoJSON FeatureCollection with polygons first, then lines."""

        features = [polygon_feature(ring) for ring in self.polygons]
        features.extend(line_feature(line) for line in self.lines)
        return feature_collection(features)


def project(sequence: WaypointSequence) -> ProjectedGeometry:
    """Split ``sequence`` into line strings and polygons."""

    geometry = ProjectedGeometry()
    current_line: List[Coordinate] = []
    for element in sequence:
        if isinstance(element, PointElement):
            current_line.append(element.coord)
        elif isinstance(element, PolygonBlock):
            if not element.ring:
                continue
            # A lone trailing point is still flushed here.
            if current_line:
                geometry.lines.append(current_line)
            geometry.polygons.append(list(element.coordinates))
            current_line = [element.exit_point]
        else:
            raise TypeError(f"Unsupported sequence element {type(element).__name__}")

    if len(current_line) >= 2:
        geometry.lines.append(current_line)

    LOGGER.debug(
        "Projected %s lines and %s polygons", len(geometry.lines), len(geometry.polygons)
    )
    return geometry

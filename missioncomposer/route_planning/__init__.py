"""Mini README: Route composition subsystem.

Exports the waypoint sequence model, the polygon splicer, the geometry
projector and the ``MissionComposer`` orchestrator that ties them to draw
sessions.
"""

from .composer import MissionComposer
from .projector import ProjectedGeometry, project
from .sequence import (
    AnchorIndexError,
    PointElement,
    PolygonBlock,
    SequenceElement,
    WaypointSequence,
)
from .splicer import splice_polygon

__all__ = [
    "AnchorIndexError",
    "MissionComposer",
    "PointElement",
    "PolygonBlock",
    "ProjectedGeometry",
    "SequenceElement",
    "WaypointSequence",
    "project",
    "splice_polygon",
]

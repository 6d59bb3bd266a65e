"""Mini README: Splice a freshly drawn polygon ring into a route.

``splice_polygon`` pins the ring's first and last vertices to the anchor
coordinate so the rendered route leaves and re-enters the same waypoint
without requiring the draw interaction to snap to existing geometry.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..geodesy import distance_between
from ..logging_utils import get_logger
from .sequence import MIN_RING_VERTICES, PointElement, PolygonBlock, as_coordinate

LOGGER = get_logger(__name__)


def splice_polygon(
    ring: Sequence[Sequence[float]],
    anchor: Sequence[float],
    connection_index: Optional[int] = None,
) -> PolygonBlock:
    """Return a polygon block whose ring starts and ends at ``anchor``.

    Empty rings come back empty. Rings with fewer than three vertices are
    returned unanchored with zero distances so the caller can reject them.
    """

    vertices = [as_coordinate(point) for point in ring]
    if not vertices:
        LOGGER.debug("Splice requested for an empty ring; nothing to anchor")
        return PolygonBlock(connection_index=connection_index)

    if len(vertices) < MIN_RING_VERTICES:
        LOGGER.warning(
            "Ring with %s vertices is degenerate; returning it unanchored", len(vertices)
        )
        return PolygonBlock(
            ring=tuple(PointElement(coord=vertex) for vertex in vertices),
            connection_index=connection_index,
        )

    anchor_coord = as_coordinate(anchor)
    vertices[0] = anchor_coord
    vertices[-1] = anchor_coord

    annotated: List[PointElement] = []
    for index, vertex in enumerate(vertices):
        distance = distance_between(vertices[index - 1], vertex) if index > 0 else 0.0
        annotated.append(PointElement(coord=vertex, distance_from_prev=distance))

    LOGGER.debug(
        "Spliced ring of %s vertices at anchor %s (connection_index=%s)",
        len(annotated),
        anchor_coord,
        connection_index,
    )
    return PolygonBlock(ring=tuple(annotated), connection_index=connection_index)

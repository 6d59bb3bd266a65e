"""Mini README: Orchestrates draw sessions against the current route.

Structure:
    * MissionComposer - owns the current ``WaypointSequence`` and the active
      ``DrawSession``; every change reassigns the result of a pure call.

A committed route draw replaces the sequence. A committed polygon draw is
spliced at the selected anchor and inserted before or after it. Empty or
degenerate commits leave the sequence untouched. Starting a session always
cancels the one before it, so at most one draw is active.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..capture import (
    DrawCapture,
    DrawKind,
    DrawSession,
    DrawSessionError,
    InsertPosition,
)
from ..geodesy import format_coordinates
from ..logging_utils import get_logger
from .projector import ProjectedGeometry, project
from .sequence import PointElement, PolygonBlock, WaypointSequence
from .splicer import splice_polygon

LOGGER = get_logger(__name__)


def _format_distance(distance: float, decimals: int) -> str:
    return f"{distance:.{decimals}f}" if distance else "--"


class MissionComposer:
    """Compose a mission from a drawn route and spliced polygon detours."""

    def __init__(
        self,
        *,
        capture: Optional[DrawCapture] = None,
        sequence: Optional[WaypointSequence] = None,
        recompute_following: bool = True,
    ) -> None:
        self.capture = capture or DrawCapture()
        self.sequence = sequence or WaypointSequence()
        self.recompute_following = recompute_following
        self.session: Optional[DrawSession] = None
        LOGGER.debug(
            "Initialised MissionComposer with %s elements (recompute_following=%s)",
            len(self.sequence),
            recompute_following,
        )

    @property
    def drawing_mode(self) -> Optional[DrawKind]:
        """Kind of the active draw session, if any."""

        if self.session is not None and self.session.is_active:
            return self.session.kind
        return None

    def start_route_draw(self) -> DrawSession:
        return self._start(DrawSession(kind=DrawKind.LINE_STRING))

    def start_polygon_draw(
        self,
        anchor_index: int,
        position: Union[InsertPosition, str] = InsertPosition.AFTER,
    ) -> DrawSession:
        """Begin drawing a detour attached to the element at ``anchor_index``."""

        if self.sequence.is_empty():
            raise DrawSessionError("Draw a route before inserting polygons")
        self.sequence.anchor_coordinate(anchor_index)
        return self._start(
            DrawSession(
                kind=DrawKind.POLYGON,
                anchor_index=anchor_index,
                position=InsertPosition(position),
            )
        )

    def _start(self, session: DrawSession) -> DrawSession:
        self.cancel()
        session.begin()
        self.session = session
        LOGGER.info(
            "Started %s draw (anchor=%s position=%s)",
            session.kind.value,
            session.anchor_index,
            session.position.value,
        )
        return session

    def _active_session(self) -> DrawSession:
        if self.session is None or not self.session.is_active:
            raise DrawSessionError("No draw session is active")
        return self.session

    def add_points(self, raw_points: Iterable[Sequence[float]]) -> int:
        """Convert and append raw points; returns the number captured so far."""

        session = self._active_session()
        session.add_points(self.capture.capture(raw_points))
        return len(session.points)

    def commit(self) -> WaypointSequence:
        """Materialise the active session into the current sequence."""

        session = self._active_session()
        captured = session.commit()
        if not captured:
            LOGGER.info("Committed %s draw without points; route unchanged", session.kind.value)
            return self.sequence

        if session.kind is DrawKind.LINE_STRING:
            self.sequence = WaypointSequence.from_drawn_line(captured)
            LOGGER.info("Route replaced with %s waypoints", len(self.sequence))
            return self.sequence

        anchor_index = session.anchor_index
        anchor = self.sequence.anchor_coordinate(anchor_index)
        connection_index = anchor_index if session.before else anchor_index + 1
        block = splice_polygon(captured, anchor, connection_index)
        if block.is_degenerate:
            LOGGER.warning(
                "Discarded polygon with %s vertices; at least 3 are required",
                len(block.ring),
            )
            return self.sequence

        self.sequence = self.sequence.insert_polygon(
            block,
            anchor_index,
            session.before,
            recompute_following=self.recompute_following,
        )
        LOGGER.info(
            "Inserted polygon %s waypoint %s; route now has %s elements",
            session.position.value,
            anchor_index,
            len(self.sequence),
        )
        return self.sequence

    def cancel(self) -> None:
        if self.session is not None and self.session.is_active:
            self.session.cancel()
            LOGGER.info("Cancelled %s draw", self.session.kind.value)

    def geometries(self) -> ProjectedGeometry:
        return project(self.sequence)

    def total_distance(self) -> float:
        return self.sequence.total_distance()

    def rows(self, *, coordinate_decimals: int = 8, distance_decimals: int = 1) -> List[Dict[str, Any]]:
        """Return waypoint table rows for display."""

        rows: List[Dict[str, Any]] = []
        for index, element in enumerate(self.sequence):
            if isinstance(element, PointElement):
                lon, lat = element.coord
                rows.append(
                    {
                        "wp": f"{index:02d}",
                        "kind": "point",
                        "coordinates": f"{lon:.{coordinate_decimals}f}, {lat:.{coordinate_decimals}f}",
                        "display": format_coordinates(element.coord, coordinate_decimals),
                        "distance": _format_distance(element.distance_from_prev, distance_decimals),
                        "vertices": [],
                    }
                )
            elif isinstance(element, PolygonBlock):
                rows.append(
                    {
                        "wp": f"{index:02d}",
                        "kind": "polygon",
                        "coordinates": "Polygon",
                        "display": f"Polygon ({len(element.ring)} vertices)",
                        "distance": _format_distance(element.entry_distance, distance_decimals),
                        "vertices": [
                            {
                                "wp": f"{vertex_index:02d}",
                                "display": format_coordinates(vertex.coord, coordinate_decimals),
                                "distance": _format_distance(vertex.distance_from_prev, distance_decimals),
                            }
                            for vertex_index, vertex in enumerate(element.ring)
                        ],
                    }
                )
            else:
                raise TypeError(f"Unsupported sequence element {type(element).__name__}")
        return rows

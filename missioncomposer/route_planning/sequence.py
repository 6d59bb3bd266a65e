"""Mini README: Mixed point/polygon waypoint sequence.

Structure:
    * PointElement - single waypoint with its distance from the previous element.
    * PolygonBlock - polygon detour occupying one slot of the route.
    * WaypointSequence - immutable ordered sequence of both element kinds.
    * AnchorIndexError - raised when an insertion anchor is out of range.

Every operation returns a new ``WaypointSequence``; callers reassign the result
instead of mutating shared state. Traversing the elements in order, and each
polygon's ring in order, yields the full travel path.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..geodesy import Coordinate, distance_between
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MIN_RING_VERTICES = 3


def as_coordinate(point: Sequence[float]) -> Coordinate:
    """Coerce a ``(lon, lat)`` pair into a ``Coordinate``."""

    return Coordinate(float(point[0]), float(point[1]))


@dataclass(frozen=True, slots=True)
class PointElement:
    """Waypoint and the great-circle distance from the previous connection point."""

    coord: Coordinate
    distance_from_prev: float = 0.0


@dataclass(frozen=True, slots=True)
class PolygonBlock:
    """Polygon detour entered and exited at the same anchor coordinate.

    ``ring`` holds the vertices in travel order, each annotated with its
    distance from the previous vertex. ``connection_index`` records the slot
    the block was attached at and is informational only. ``entry_distance`` is
    the distance from the preceding element's connection point to the ring's
    first vertex, filled in when the block is inserted into a sequence.
    """

    ring: Tuple[PointElement, ...] = ()
    connection_index: Optional[int] = None
    entry_distance: float = 0.0

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        return tuple(vertex.coord for vertex in self.ring)

    @property
    def entry_point(self) -> Coordinate:
        if not self.ring:
            raise ValueError("Empty polygon block has no entry point")
        return self.ring[0].coord

    @property
    def exit_point(self) -> Coordinate:
        if not self.ring:
            raise ValueError("Empty polygon block has no exit point")
        return self.ring[-1].coord

    @property
    def is_degenerate(self) -> bool:
        return len(self.ring) < MIN_RING_VERTICES

    @property
    def perimeter(self) -> float:
        """Distance travelled around the ring in metres."""

        return sum(vertex.distance_from_prev for vertex in self.ring)


SequenceElement = Union[PointElement, PolygonBlock]


def connection_point(element: SequenceElement) -> Coordinate:
    """Return the coordinate the next element's distance is measured from."""

    if isinstance(element, PointElement):
        return element.coord
    if isinstance(element, PolygonBlock):
        return element.exit_point
    raise TypeError(f"Unsupported sequence element {type(element).__name__}")


class AnchorIndexError(IndexError):
    """Raised when an anchor index does not address an existing element."""


@dataclass(frozen=True, slots=True)
class WaypointSequence:
    """Ordered route composed of point waypoints and polygon detours."""

    elements: Tuple[SequenceElement, ...] = ()

    @classmethod
    def from_drawn_line(cls, points: Iterable[Sequence[float]]) -> "WaypointSequence":
        """Build a fresh sequence from a drawn line of ``(lon, lat)`` points."""

        elements: List[PointElement] = []
        previous: Optional[Coordinate] = None
        for point in points:
            coord = as_coordinate(point)
            distance = distance_between(previous, coord) if previous is not None else 0.0
            elements.append(PointElement(coord=coord, distance_from_prev=distance))
            previous = coord
        LOGGER.debug("Built waypoint sequence with %s points", len(elements))
        return cls(elements=tuple(elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[SequenceElement]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> SequenceElement:
        return self.elements[index]

    def is_empty(self) -> bool:
        return not self.elements

    def _check_anchor(self, anchor_index: int) -> None:
        if not 0 <= anchor_index < len(self.elements):
            raise AnchorIndexError(
                f"Anchor index {anchor_index} outside [0, {len(self.elements) - 1}]"
            )

    def anchor_coordinate(self, anchor_index: int) -> Coordinate:
        """Return the coordinate a polygon spliced at ``anchor_index`` attaches to.

        Both insertion directions share the selected element's connection
        point; for a polygon block that is its exit vertex.
        """

        self._check_anchor(anchor_index)
        return connection_point(self.elements[anchor_index])

    def insert_polygon(
        self,
        block: PolygonBlock,
        anchor_index: int,
        before: bool,
        *,
        recompute_following: bool = True,
    ) -> "WaypointSequence":
        """Return a new sequence with ``block`` placed before or after the anchor.

        Existing elements keep their order. With ``recompute_following`` the
        element right after the block is re-measured from the block's exit
        vertex; otherwise its stored distance is left as it was. An empty
        block has nothing to travel, so the sequence is returned unchanged.
        """

        self._check_anchor(anchor_index)
        if not block.ring:
            LOGGER.debug("Ignoring empty polygon block at anchor %s", anchor_index)
            return self
        position = anchor_index if before else anchor_index + 1
        elements: List[SequenceElement] = list(self.elements)

        entry_distance = (
            distance_between(connection_point(elements[position - 1]), block.entry_point)
            if position > 0
            else 0.0
        )
        block = replace(block, entry_distance=entry_distance)
        elements.insert(position, block)

        following_index = position + 1
        if recompute_following and following_index < len(elements):
            following = elements[following_index]
            if isinstance(following, PointElement):
                elements[following_index] = replace(
                    following,
                    distance_from_prev=distance_between(block.exit_point, following.coord),
                )
            elif isinstance(following, PolygonBlock):
                if following.ring:
                    elements[following_index] = replace(
                        following,
                        entry_distance=distance_between(block.exit_point, following.entry_point),
                    )
            else:
                raise TypeError(f"Unsupported sequence element {type(following).__name__}")

        LOGGER.debug(
            "Inserted polygon block with %s vertices at position %s (anchor=%s before=%s)",
            len(block.ring),
            position,
            anchor_index,
            before,
        )
        return WaypointSequence(elements=tuple(elements))

    def travel_path(self) -> List[Coordinate]:
        """Flatten the sequence into the coordinates visited in route order."""

        path: List[Coordinate] = []
        for element in self.elements:
            if isinstance(element, PointElement):
                path.append(element.coord)
            elif isinstance(element, PolygonBlock):
                path.extend(element.coordinates)
            else:
                raise TypeError(f"Unsupported sequence element {type(element).__name__}")
        return path

    def total_distance(self) -> float:
        """Sum of the stored distances, polygon perimeters included."""

        total = 0.0
        for element in self.elements:
            if isinstance(element, PointElement):
                total += element.distance_from_prev
            elif isinstance(element, PolygonBlock):
                total += element.entry_distance + element.perimeter
            else:
                raise TypeError(f"Unsupported sequence element {type(element).__name__}")
        return total

"""Mini README: Draw session state machine and coordinate conversion.

Structure:
    * DrawKind - route (LineString) or detour (Polygon) draw.
    * InsertPosition - whether a detour goes before or after its anchor.
    * DrawSessionState - IDLE -> DRAWING -> COMMITTED | CANCELLED.
    * DrawSession - points captured during one draw interaction.
    * DrawCapture - converts raw map coordinates into checked ``Coordinate`` values.

The map widget reports projected ``(x, y)`` pairs. ``DrawCapture`` applies an
injected inverse projection and rejects anything that is not a finite WGS84
position, so NaN never reaches the distance calculations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..geodesy import Coordinate
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

InverseTransform = Callable[[float, float], Tuple[float, float]]


class DrawKind(str, Enum):
    """Geometry type produced by a draw session."""

    LINE_STRING = "LineString"
    POLYGON = "Polygon"


class InsertPosition(str, Enum):
    """Placement of a polygon detour relative to the selected waypoint."""

    BEFORE = "before"
    AFTER = "after"


class DrawSessionState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class CoordinateValidationError(ValueError):
    """Raised when a captured coordinate is malformed or outside WGS84 bounds."""


class DrawSessionError(RuntimeError):
    """Raised when a draw operation does not fit the session lifecycle."""


@dataclass(slots=True)
class DrawSession:
    """One draw interaction and the coordinates it has captured so far."""

    kind: DrawKind
    anchor_index: Optional[int] = None
    position: InsertPosition = InsertPosition.AFTER
    state: DrawSessionState = DrawSessionState.IDLE
    points: List[Coordinate] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.state is DrawSessionState.DRAWING

    @property
    def before(self) -> bool:
        return self.position is InsertPosition.BEFORE

    def begin(self) -> None:
        if self.state is not DrawSessionState.IDLE:
            raise DrawSessionError(f"Cannot start a session that is {self.state.value}")
        self.state = DrawSessionState.DRAWING

    def add_points(self, coordinates: Iterable[Coordinate]) -> None:
        if not self.is_active:
            raise DrawSessionError(f"Cannot add points to a session that is {self.state.value}")
        self.points.extend(coordinates)

    def commit(self) -> Tuple[Coordinate, ...]:
        """Close the session and return everything captured so far."""

        if not self.is_active:
            raise DrawSessionError(f"Cannot commit a session that is {self.state.value}")
        self.state = DrawSessionState.COMMITTED
        return tuple(self.points)

    def cancel(self) -> None:
        if self.is_active:
            self.state = DrawSessionState.CANCELLED


def identity_transform(x: float, y: float) -> Tuple[float, float]:
    """Inverse transform for clients that already report ``(lon, lat)``."""

    return x, y


class DrawCapture:
    """Adapter from raw draw-interaction output to geographic coordinates."""

    def __init__(self, inverse_transform: Optional[InverseTransform] = None) -> None:
        self.inverse_transform = inverse_transform or identity_transform

    def to_coordinate(self, raw: Sequence[float]) -> Coordinate:
        """Convert and validate a single raw ``(x, y)`` pair."""

        try:
            x, y = (float(value) for value in raw)
        except (TypeError, ValueError) as error:
            raise CoordinateValidationError(f"Malformed coordinate {raw!r}") from error

        lon, lat = self.inverse_transform(x, y)
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise CoordinateValidationError(f"Coordinate ({lon}, {lat}) is not finite")
        if not -180.0 <= lon <= 180.0:
            raise CoordinateValidationError(f"Longitude {lon} outside [-180, 180]")
        if not -90.0 <= lat <= 90.0:
            raise CoordinateValidationError(f"Latitude {lat} outside [-90, 90]")
        return Coordinate(lon, lat)

    def capture(self, raw_points: Iterable[Sequence[float]]) -> List[Coordinate]:
        """Convert a batch of raw points, failing on the first invalid one."""

        coordinates = [self.to_coordinate(raw) for raw in raw_points]
        LOGGER.debug("Captured %s coordinates", len(coordinates))
        return coordinates

"""Mini README: FastAPI-powered mission composition service.

Structure:
    * DrawStartRequest / DrawCommitRequest - request bodies for draw sessions.
    * create_application - application factory wiring routes and templates.

The map client performs the draw interaction and posts geographic
coordinates (or a GeoJSON geometry) when the operator presses Enter. The
service keeps a single in-memory ``MissionComposer`` per application and
returns the waypoint table and projected geometry for redrawing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from ..capture import (
    CoordinateValidationError,
    DrawKind,
    DrawSessionError,
    InsertPosition,
)
from ..configuration import get_settings
from ..logging_utils import configure_root_logger, get_logger
from ..route_planning import AnchorIndexError, MissionComposer
from ..utils.geojson import coordinates_from_geojson

LOGGER = get_logger(__name__)

INSTRUCTIONS = {
    DrawKind.LINE_STRING: (
        "Click on the map to mark points of the route and then press ↵ to complete the route."
    ),
    DrawKind.POLYGON: (
        "Click on the map to mark points of the polygon's perimeter, then press ↵ "
        "to close and complete the polygon"
    ),
}


class DrawStartRequest(BaseModel):
    """Begin a route draw, or a polygon draw anchored on an existing row."""

    kind: DrawKind
    anchor_index: Optional[int] = None
    position: InsertPosition = InsertPosition.AFTER


class DrawCommitRequest(BaseModel):
    """Points captured by the draw interaction, as pairs or a GeoJSON geometry."""

    coordinates: List[Tuple[float, float]] = Field(default_factory=list)
    geojson: Optional[Dict[str, Any]] = None


def create_application(composer: Optional[MissionComposer] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="Mission Composer", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    settings = get_settings()
    configure_root_logger(settings.log_level)
    composer = composer or MissionComposer()

    def mission_payload() -> Dict[str, Any]:
        session = composer.session
        return {
            "rows": composer.rows(
                coordinate_decimals=settings.coordinate_decimals,
                distance_decimals=settings.distance_decimals,
            ),
            "total_distance_m": composer.total_distance(),
            "drawing_mode": composer.drawing_mode.value if composer.drawing_mode else None,
            "session_state": session.state.value if session else "idle",
            "geometries": composer.geometries().to_geojson(),
            "map": {
                "center": [settings.map_center_longitude, settings.map_center_latitude],
                "zoom": settings.map_zoom,
            },
        }

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the waypoint table with draw instructions."""

        mode = composer.drawing_mode
        LOGGER.debug("Rendering dashboard with drawing mode %s", mode)
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "rows": mission_payload()["rows"],
                "instructions": INSTRUCTIONS.get(mode or DrawKind.LINE_STRING),
                "title": "Polygon Tool" if mode is DrawKind.POLYGON else "Mission Creation",
            },
        )

    @app.get("/mission")
    async def mission() -> JSONResponse:
        """Return the waypoint table, total distance and session state."""

        return JSONResponse(mission_payload())

    @app.get("/mission/geometries")
    async def geometries() -> JSONResponse:
        """Return the projected route as a GeoJSON FeatureCollection."""

        return JSONResponse(composer.geometries().to_geojson())

    @app.post("/draw/start")
    async def start_draw(body: DrawStartRequest) -> JSONResponse:
        """Start a draw session, cancelling any session already in progress."""

        try:
            if body.kind is DrawKind.LINE_STRING:
                session = composer.start_route_draw()
            else:
                if body.anchor_index is None:
                    raise HTTPException(status_code=400, detail="anchor_index is required for polygons")
                session = composer.start_polygon_draw(body.anchor_index, body.position)
        except (AnchorIndexError, DrawSessionError) as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {
                "kind": session.kind.value,
                "state": session.state.value,
                "instructions": INSTRUCTIONS[session.kind],
            }
        )

    @app.post("/draw/commit")
    async def commit_draw(body: DrawCommitRequest) -> JSONResponse:
        """Add the captured points to the active session and commit it."""

        points: List[Tuple[float, float]] = list(body.coordinates)
        if body.geojson is not None:
            try:
                geometry_type, points = coordinates_from_geojson(body.geojson)
            except ValueError as error:
                raise HTTPException(status_code=400, detail=str(error)) from error
            if composer.drawing_mode and geometry_type != composer.drawing_mode.value:
                raise HTTPException(
                    status_code=400,
                    detail=f"Expected {composer.drawing_mode.value} geometry, got {geometry_type}",
                )
        try:
            composer.add_points(points)
            composer.commit()
        except CoordinateValidationError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        except DrawSessionError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Committed draw; route has %s elements", len(composer.sequence))
        return JSONResponse(mission_payload())

    @app.post("/draw/cancel")
    async def cancel_draw() -> JSONResponse:
        """Cancel the active draw session, leaving the route untouched."""

        composer.cancel()
        return JSONResponse(mission_payload())

    return app

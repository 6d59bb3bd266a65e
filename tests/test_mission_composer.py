"""Mini README: Tests for the mission composer orchestrator.

Walks through route drawing, polygon insertion, cancellation and the no-op
paths that must leave the current route untouched.
"""

from __future__ import annotations

import pytest

from missioncomposer.capture import (
    CoordinateValidationError,
    DrawCapture,
    DrawKind,
    DrawSessionError,
    DrawSessionState,
    InsertPosition,
)
from missioncomposer.route_planning import AnchorIndexError, MissionComposer, PolygonBlock

ROUTE = [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)]
RING = [(1.0, 1.0), (1.0, 2.0), (2.0, 2.0), (1.0, 1.0)]


@pytest.fixture
def composer() -> MissionComposer:
    composer = MissionComposer()
    composer.start_route_draw()
    composer.add_points(ROUTE)
    composer.commit()
    return composer


def test_route_draw_builds_sequence(composer: MissionComposer) -> None:
    assert len(composer.sequence) == 3
    assert composer.drawing_mode is None
    assert composer.session.state is DrawSessionState.COMMITTED
    assert composer.total_distance() == pytest.approx(2 * 111_195, abs=2)


def test_polygon_draw_inserts_after_anchor(composer: MissionComposer) -> None:
    composer.start_polygon_draw(1, "after")
    assert composer.drawing_mode is DrawKind.POLYGON
    composer.add_points(RING)
    sequence = composer.commit()

    assert len(sequence) == 4
    block = sequence[2]
    assert isinstance(block, PolygonBlock)
    assert block.coordinates[0] == block.coordinates[-1] == (0.0, 1.0)
    assert block.connection_index == 2


def test_polygon_draw_inserts_before_anchor(composer: MissionComposer) -> None:
    composer.start_polygon_draw(2, InsertPosition.BEFORE)
    composer.add_points(RING)
    sequence = composer.commit()

    assert isinstance(sequence[2], PolygonBlock)
    assert sequence[2].connection_index == 2
    assert sequence[2].entry_point == (0.0, 2.0)


def test_polygon_draw_requires_route_and_valid_anchor() -> None:
    composer = MissionComposer()
    with pytest.raises(DrawSessionError):
        composer.start_polygon_draw(0)

    composer.start_route_draw()
    composer.add_points(ROUTE)
    composer.commit()
    with pytest.raises(AnchorIndexError):
        composer.start_polygon_draw(5)


def test_empty_commit_leaves_route_unchanged(composer: MissionComposer) -> None:
    before = composer.sequence
    composer.start_route_draw()
    assert composer.commit() is before

    composer.start_polygon_draw(0)
    assert composer.commit() is before


def test_degenerate_polygon_is_discarded(composer: MissionComposer) -> None:
    before = composer.sequence
    composer.start_polygon_draw(0)
    composer.add_points([(1.0, 1.0), (2.0, 2.0)])
    assert composer.commit() is before


def test_cancel_discards_captured_points(composer: MissionComposer) -> None:
    before = composer.sequence
    session = composer.start_polygon_draw(1)
    composer.add_points(RING)
    composer.cancel()

    assert session.state is DrawSessionState.CANCELLED
    assert composer.sequence is before
    with pytest.raises(DrawSessionError):
        composer.commit()


def test_starting_a_session_cancels_the_previous_one(composer: MissionComposer) -> None:
    first = composer.start_polygon_draw(0)
    second = composer.start_route_draw()
    assert first.state is DrawSessionState.CANCELLED
    assert second.is_active


def test_new_route_replaces_composed_sequence(composer: MissionComposer) -> None:
    composer.start_polygon_draw(1)
    composer.add_points(RING)
    composer.commit()

    composer.start_route_draw()
    composer.add_points([(10.0, 10.0), (10.0, 11.0)])
    composer.commit()

    assert len(composer.sequence) == 2
    assert composer.geometries().polygons == []


def test_invalid_points_are_rejected_without_partial_writes(composer: MissionComposer) -> None:
    session = composer.start_route_draw()
    with pytest.raises(CoordinateValidationError):
        composer.add_points([(0.0, 0.0), (0.0, 95.0)])
    assert session.points == []


def test_inverse_transform_is_applied_to_drawn_points() -> None:
    composer = MissionComposer(capture=DrawCapture(inverse_transform=lambda x, y: (y, x)))
    composer.start_route_draw()
    composer.add_points([(22.6, 88.8)])
    composer.commit()
    assert composer.sequence[0].coord == (88.8, 22.6)


def test_rows_mirror_waypoint_table(composer: MissionComposer) -> None:
    composer.start_polygon_draw(1)
    composer.add_points(RING)
    composer.commit()

    rows = composer.rows()

    assert [row["wp"] for row in rows] == ["00", "01", "02", "03"]
    assert rows[0]["distance"] == "--"
    assert rows[0]["coordinates"] == "0.00000000, 0.00000000"
    assert rows[1]["distance"] == "111194.9"
    assert rows[1]["display"] == "1.00000000°N, 0.00000000°E"
    assert rows[2]["coordinates"] == "Polygon"
    assert len(rows[2]["vertices"]) == 4
    assert rows[2]["vertices"][0]["distance"] == "--"

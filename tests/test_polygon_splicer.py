"""Mini README: Tests for polygon splicing.

Ensures rings are pinned to their anchor, vertex distances are annotated and
degenerate rings are handed back untouched.
"""

from __future__ import annotations

import pytest

from missioncomposer.geodesy import distance_between
from missioncomposer.route_planning import splice_polygon


@pytest.mark.parametrize(
    "ring",
    [
        [(1.0, 1.0), (1.0, 2.0), (2.0, 2.0), (1.0, 1.0)],
        [(5.0, 5.0), (5.5, 6.0), (6.0, 5.0)],
        [(10.0, 0.0), (10.0, 1.0), (11.0, 1.0), (11.0, 0.0), (10.0, 0.0)],
    ],
)
def test_splice_closes_ring_on_anchor(ring) -> None:
    anchor = (0.0, 1.0)
    block = splice_polygon(ring, anchor)
    assert block.ring[0].coord == anchor
    assert block.ring[-1].coord == anchor
    assert len(block.ring) == len(ring)


def test_splice_annotates_vertex_distances() -> None:
    block = splice_polygon([(1.0, 1.0), (1.0, 2.0), (2.0, 2.0), (1.0, 1.0)], (0.0, 1.0))
    coordinates = block.coordinates
    assert block.ring[0].distance_from_prev == 0
    for index in range(1, len(coordinates)):
        expected = distance_between(coordinates[index - 1], coordinates[index])
        assert block.ring[index].distance_from_prev == pytest.approx(expected)
    assert block.perimeter == pytest.approx(sum(v.distance_from_prev for v in block.ring))


def test_splice_passes_connection_index_through() -> None:
    block = splice_polygon([(1.0, 1.0), (1.0, 2.0), (2.0, 2.0)], (0.0, 0.0), connection_index=4)
    assert block.connection_index == 4


def test_empty_ring_is_returned_empty() -> None:
    block = splice_polygon([], (0.0, 0.0), connection_index=1)
    assert block.ring == ()
    assert block.is_degenerate


def test_degenerate_ring_is_left_unanchored() -> None:
    block = splice_polygon([(3.0, 3.0), (4.0, 4.0)], (0.0, 0.0))
    assert block.is_degenerate
    assert block.coordinates == ((3.0, 3.0), (4.0, 4.0))
    assert all(vertex.distance_from_prev == 0 for vertex in block.ring)

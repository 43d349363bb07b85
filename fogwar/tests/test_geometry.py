import pytest

from fogwar.engine.geometry import (
    WallEdge,
    chebyshev,
    distance_fn,
    euclidean,
    lattice_crossings,
    manhattan,
    segment_intersection_blocks,
    tile_center,
)


def test_proper_crossing_blocks():
    # Horizontal LOS crossing a vertical wall edge at midpoint
    seg = (tile_center((0, 0)), tile_center((2, 0)))
    wall = WallEdge((1, 0), (2, 0)).canonical().segment()
    assert segment_intersection_blocks(seg, wall) is True


def test_colinear_overlap_blocks():
    seg = ((0.0, 0.0), (2.0, 0.0))
    wall = ((1.0, 0.0), (3.0, 0.0))
    assert segment_intersection_blocks(seg, wall) is True


def test_endpoint_touch_does_not_block():
    seg = (tile_center((0, 0)), tile_center((1, 1)))
    wall = WallEdge((0, 1), (1, 1)).canonical().segment()
    assert segment_intersection_blocks(seg, wall) is False


def test_wall_edge_requires_adjacent_tiles():
    with pytest.raises(ValueError):
        WallEdge((0, 0), (2, 0)).segment()


def test_lattice_crossings_on_pure_diagonal():
    assert list(lattice_crossings((0, 0), (2, 2))) == [((0, 0), (1, 1)), ((1, 1), (2, 2))]


def test_lattice_crossings_skip_oblique_lines():
    assert list(lattice_crossings((0, 0), (2, 1))) == []


def test_distance_metrics():
    assert chebyshev((5, 5), (7, 6)) == 2
    assert manhattan((5, 5), (7, 6)) == 3
    assert euclidean((5, 5), (7, 6)) == 3
    assert euclidean((0, 0), (3, 0)) == 3


def test_unknown_metric_rejected():
    with pytest.raises(ValueError):
        distance_fn("hex")

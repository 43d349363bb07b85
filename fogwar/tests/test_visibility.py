from fogwar.common.types import Terrain, UnitClass
from fogwar.engine.state import UnitType
from fogwar.engine.visibility import TileVisibility, classify, merge

SCOUT = UnitType("scout", los_range=4, cover_los_range=2, unit_class=UnitClass.INFANTRY)


def test_classifier_boundaries_hold_for_every_terrain():
    for terrain in Terrain:
        for d in range(0, SCOUT.cover_los_range + 1):
            assert classify(d, terrain, SCOUT) == TileVisibility.EXCELLENT
        for d in range(SCOUT.los_range + 1, SCOUT.los_range + 4):
            assert classify(d, terrain, SCOUT) == TileVisibility.NONE


def test_medium_range_depends_on_terrain():
    assert classify(3, Terrain.TREES, SCOUT) == TileVisibility.NORMAL
    assert classify(4, Terrain.TREES, SCOUT) == TileVisibility.NORMAL
    assert classify(3, Terrain.PLAIN, SCOUT) == TileVisibility.EXCELLENT


def test_zero_range_unit_sees_own_tile_only():
    blind = UnitType("blind", los_range=0, cover_los_range=0)
    assert classify(0, Terrain.TREES, blind) == TileVisibility.EXCELLENT
    assert classify(1, Terrain.PLAIN, blind) == TileVisibility.NONE


def test_rank_orders_levels():
    assert TileVisibility.NONE.rank < TileVisibility.NORMAL.rank < TileVisibility.EXCELLENT.rank


def test_merge_keeps_the_best_level():
    levels = list(TileVisibility)
    for a in levels:
        assert merge(a, a) == a
        for b in levels:
            assert merge(a, b) == merge(b, a)
            assert merge(a, b).rank == max(a.rank, b.rank)


def test_levels_compare_by_rank():
    assert TileVisibility.NONE < TileVisibility.NORMAL < TileVisibility.EXCELLENT
    assert max(TileVisibility.NORMAL, TileVisibility.EXCELLENT) == TileVisibility.EXCELLENT
    assert max(TileVisibility) == TileVisibility.EXCELLENT
    assert sorted([TileVisibility.EXCELLENT, TileVisibility.NONE, TileVisibility.NORMAL]) == [
        TileVisibility.NONE,
        TileVisibility.NORMAL,
        TileVisibility.EXCELLENT,
    ]

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from fogwar.common.types import Terrain
from fogwar.engine.state import UnitType


@total_ordering
class TileVisibility(Enum):
    NONE = "none"
    NORMAL = "normal"
    EXCELLENT = "excellent"

    @property
    def rank(self) -> int:
        return _RANK[self]

    def __lt__(self, other):
        if not isinstance(other, TileVisibility):
            return NotImplemented
        return self.rank < other.rank


# Merging takes the highest rank; declaration order is not relied upon.
_RANK = {
    TileVisibility.NONE: 0,
    TileVisibility.NORMAL: 1,
    TileVisibility.EXCELLENT: 2,
}


def merge(current: TileVisibility, new: TileVisibility) -> TileVisibility:
    return new if new.rank > current.rank else current


def classify(distance: int, terrain: Terrain, unit_type: UnitType) -> TileVisibility:
    """Visibility quality a unit of ``unit_type`` gets on a tile ``distance`` away.

    Inside cover range everything is seen clearly; beyond it, vegetation
    degrades the view to NORMAL until the sight range runs out.
    """
    if distance <= unit_type.cover_los_range:
        return TileVisibility.EXCELLENT
    if distance <= unit_type.los_range:
        if terrain == Terrain.TREES:
            return TileVisibility.NORMAL
        return TileVisibility.EXCELLENT
    return TileVisibility.NONE

from __future__ import annotations

from enum import Enum
from typing import Tuple

Tile = Tuple[int, int]
Point = Tuple[float, float]
Edge = Tuple[Point, Point]
Size = Tuple[int, int]


class Terrain(str, Enum):
    PLAIN = "plain"
    TREES = "trees"


class UnitClass(str, Enum):
    INFANTRY = "infantry"
    VEHICLE = "vehicle"

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from fogwar.common.config import settings
from fogwar.common.errors import InvalidPosition, UnknownUnitId, UnknownUnitType
from fogwar.common.types import Size, Terrain, Tile, UnitClass
from fogwar.engine.geometry import WallEdge, distance_fn, in_bounds, los_clear


class TerrainGrid:
    """Terrain, occluding walls and the distance metric for one map.

    Tiles default to open ground. Walls sit on the edges between orthogonally
    adjacent tiles and are the only thing that blocks line of sight.
    """

    def __init__(
        self,
        width: int,
        height: int,
        terrain: dict[Tile, Terrain] | None = None,
        walls: Iterable[WallEdge] = (),
        metric: str | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self.metric = metric or settings.distance_metric
        self._distance = distance_fn(self.metric)
        self._terrain: list[list[Terrain]] = [
            [Terrain.PLAIN for _ in range(width)] for _ in range(height)
        ]
        for pos, kind in (terrain or {}).items():
            self.set_terrain(pos, kind)
        self.walls: set[WallEdge] = set()
        for wall in walls:
            self.add_wall(wall)

    @classmethod
    def blank(cls, metric: str | None = None) -> TerrainGrid:
        return cls(settings.grid_width, settings.grid_height, metric=metric)

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    def in_bounds(self, pos: Tile) -> bool:
        return in_bounds(pos, self.size)

    def check(self, pos: Tile) -> None:
        if not self.in_bounds(pos):
            raise InvalidPosition(pos, self.size)

    def terrain(self, pos: Tile) -> Terrain:
        self.check(pos)
        x, y = pos
        return self._terrain[y][x]

    def terrain_unchecked(self, pos: Tile) -> Terrain:
        """Terrain of a tile already known to be on the grid; no bounds check."""
        x, y = pos
        return self._terrain[y][x]

    def set_terrain(self, pos: Tile, kind: Terrain) -> None:
        self.check(pos)
        x, y = pos
        self._terrain[y][x] = kind

    def add_wall(self, wall: WallEdge) -> None:
        self.check(wall.a)
        self.check(wall.b)
        wall.segment()
        self.walls.add(wall.canonical())

    def distance(self, a: Tile, b: Tile) -> int:
        return self._distance(a, b)

    def los_clear(self, a: Tile, b: Tile) -> bool:
        return los_clear(a, b, self.walls)

    def tiles(self) -> list[Tile]:
        return [(x, y) for y in range(self.height) for x in range(self.width)]


@dataclass(frozen=True)
class UnitType:
    name: str
    los_range: int
    cover_los_range: int
    unit_class: UnitClass = UnitClass.INFANTRY

    def __post_init__(self) -> None:
        if self.los_range < 0 or self.cover_los_range < 0:
            raise ValueError("Sight ranges must be non-negative")
        if self.cover_los_range > self.los_range:
            raise ValueError("cover_los_range cannot exceed los_range")


@dataclass
class Unit:
    unit_id: str
    player_id: str
    type_id: str
    pos: Tile


@dataclass
class World:
    """Read-only view of the simulation that fog maps are computed from."""

    grid: TerrainGrid
    units: dict[str, Unit] = field(default_factory=dict)
    unit_types: dict[str, UnitType] = field(default_factory=dict)

    def unit(self, unit_id: str) -> Unit:
        try:
            return self.units[unit_id]
        except KeyError:
            raise UnknownUnitId(unit_id) from None

    def unit_type(self, type_id: str) -> UnitType:
        try:
            return self.unit_types[type_id]
        except KeyError:
            raise UnknownUnitType(type_id) from None

    def type_of(self, unit: Unit) -> UnitType:
        return self.unit_type(unit.type_id)

    def units_of(self, player_id: str) -> list[Unit]:
        return [
            unit
            for _, unit in sorted(self.units.items())
            if unit.player_id == player_id
        ]

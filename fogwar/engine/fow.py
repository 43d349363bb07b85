from __future__ import annotations

import logging
from typing import Iterable

from fogwar.common.config import settings
from fogwar.common.errors import InvalidPosition
from fogwar.common.types import Size, Tile, UnitClass
from fogwar.engine.fov import sweep
from fogwar.engine.geometry import in_bounds
from fogwar.engine.state import TerrainGrid, Unit, UnitType, World
from fogwar.engine.visibility import TileVisibility, classify, merge

logger = logging.getLogger(__name__)

FOG_GLYPHS = {
    TileVisibility.NONE: ".",
    TileVisibility.NORMAL: "+",
    TileVisibility.EXCELLENT: "#",
}


class FogMap:
    """Fog of war for a single player.

    Each tile holds the best visibility any of the player's units projects
    onto it. Projections only ever raise tiles; ``reset`` is the one place
    stale visibility is dropped.
    """

    def __init__(self, size: Size, player_id: str) -> None:
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError("Fog map dimensions must be positive")
        self.width = width
        self.height = height
        self.player_id = player_id
        self._tiles: list[list[TileVisibility]] = [
            [TileVisibility.NONE for _ in range(width)] for _ in range(height)
        ]

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    def _check(self, pos: Tile) -> None:
        if not in_bounds(pos, self.size):
            raise InvalidPosition(pos, self.size)

    def level(self, pos: Tile) -> TileVisibility:
        self._check(pos)
        x, y = pos
        return self._tiles[y][x]

    def is_tile_visible(self, pos: Tile) -> bool:
        return self.level(pos) != TileVisibility.NONE

    def is_visible(self, unit_type: UnitType, pos: Tile) -> bool:
        """Whether a unit of ``unit_type`` standing on ``pos`` is spotted.

        Infantry keeps to partial cover and is only spotted on EXCELLENT
        tiles; vehicles show up on NORMAL ones too.
        """
        level = self.level(pos)
        if level == TileVisibility.EXCELLENT:
            return True
        if level == TileVisibility.NORMAL:
            return unit_type.unit_class != UnitClass.INFANTRY
        return False

    def visible_tiles(self) -> set[Tile]:
        return {
            (x, y)
            for y, row in enumerate(self._tiles)
            for x, level in enumerate(row)
            if level != TileVisibility.NONE
        }

    def snapshot(self) -> list[list[TileVisibility]]:
        return [row[:] for row in self._tiles]

    def project_unit(
        self,
        grid: TerrainGrid,
        unit: Unit,
        unit_type: UnitType,
        origin: Tile | None = None,
    ) -> None:
        """Merge what ``unit`` sees from ``origin`` (default: its position) into the map."""
        if grid.size != self.size:
            raise ValueError(f"Grid size {grid.size} does not match fog map size {self.size}")
        origin = unit.pos if origin is None else origin
        seen = 0
        for pos in sweep(grid, origin, unit_type.los_range):
            vis = classify(grid.distance(origin, pos), grid.terrain_unchecked(pos), unit_type)
            x, y = pos
            self._tiles[y][x] = merge(self._tiles[y][x], vis)
            seen += 1
        if settings.log_sweeps:
            logger.debug(
                "Player %s: unit %s projected %s tiles from %s",
                self.player_id,
                unit.unit_id,
                seen,
                origin,
            )

    def clear(self) -> None:
        for row in self._tiles:
            for x in range(self.width):
                row[x] = TileVisibility.NONE

    def reset(self, world: World) -> None:
        """Recompute the map from scratch using current unit positions."""
        self.clear()
        units = world.units_of(self.player_id)
        for unit in units:
            self.project_unit(world.grid, unit, world.type_of(unit))
        logger.debug("Reset fog for player %s from %s units", self.player_id, len(units))


def create_fog_maps(size: Size, player_ids: Iterable[str]) -> dict[str, FogMap]:
    return {player_id: FogMap(size, player_id) for player_id in player_ids}


def render_fog_grid(fog: FogMap) -> list[str]:
    """Return ASCII rows of the fog map, top row first."""
    return ["".join(FOG_GLYPHS[level] for level in row) for row in fog.snapshot()]

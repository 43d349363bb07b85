from __future__ import annotations

from typing import Iterator

from fogwar.common.types import Tile
from fogwar.engine.state import TerrainGrid


def sweep(grid: TerrainGrid, origin: Tile, radius: int) -> Iterator[Tile]:
    """Yield every tile within ``radius`` of ``origin`` that the origin can see.

    Tiles come out row by row (y, then x), each exactly once. The origin is
    always included. Raises before yielding anything if the origin is off the
    grid or the radius is negative.
    """
    grid.check(origin)
    if radius < 0:
        raise ValueError("Sweep radius must be non-negative")
    return _sweep(grid, origin, radius)


def _sweep(grid: TerrainGrid, origin: Tile, radius: int) -> Iterator[Tile]:
    ox, oy = origin
    min_x = max(0, ox - radius)
    max_x = min(grid.width - 1, ox + radius)
    min_y = max(0, oy - radius)
    max_y = min(grid.height - 1, oy + radius)
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            tile = (x, y)
            if grid.distance(origin, tile) > radius:
                continue
            if not grid.los_clear(origin, tile):
                continue
            yield tile


def visible_tiles(grid: TerrainGrid, origin: Tile, radius: int) -> set[Tile]:
    return set(sweep(grid, origin, radius))

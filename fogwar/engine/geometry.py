from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from fogwar.common.constants import DISTANCE_METRICS
from fogwar.common.types import Edge, Point, Size, Tile

EPS = 1e-9


@dataclass(frozen=True)
class WallEdge:
    """Wall edge represented by the two orthogonal tiles it separates.

    The tiles must be orthogonal neighbors (Manhattan distance == 1).
    """

    a: Tile
    b: Tile

    def canonical(self) -> WallEdge:
        return WallEdge(*sorted([self.a, self.b]))  # type: ignore[arg-type]

    def segment(self) -> Edge:
        return edge_segment_for_tiles(self.a, self.b)


def in_bounds(tile: Tile, size: Size) -> bool:
    x, y = tile
    width, height = size
    return 0 <= x < width and 0 <= y < height


def tile_center(tile: Tile) -> Point:
    x, y = tile
    return (x + 0.5, y + 0.5)


def edge_segment_for_tiles(a: Tile, b: Tile) -> Edge:
    """Return the wall edge segment separating two orthogonal neighboring tiles."""
    ax, ay = a
    bx, by = b
    dx = bx - ax
    dy = by - ay
    if abs(dx) + abs(dy) != 1:
        raise ValueError("Wall edge requires orthogonal adjacent tiles")
    # Tiles are unit squares from (x,y) to (x+1,y+1). Edge lies on boundary.
    if dx == 1:  # b is east of a; vertical edge at x+1
        x = ax + 1
        return ((x, ay), (x, ay + 1))
    if dx == -1:  # b is west
        x = ax
        return ((x, ay), (x, ay + 1))
    if dy == 1:  # b is south; horizontal edge at y+1
        y = ay + 1
        return ((ax, y), (ax + 1, y))
    # dy == -1
    y = ay
    return ((ax, y), (ax + 1, y))


def wall_blocks(a: Tile, b: Tile, walls: set[WallEdge]) -> bool:
    if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
        return False
    return WallEdge(a, b).canonical() in walls


def segment_intersection_blocks(seg: Edge, wall_edge: Edge) -> bool:
    """Return True if the segment should be blocked by the wall edge.

    Rules:
    - Proper crossings block.
    - Colinear overlap blocks.
    - Touching at endpoints does NOT block.
    """

    p1, p2 = seg
    q1, q2 = wall_edge

    o1 = orientation(p1, p2, q1)
    o2 = orientation(p1, p2, q2)
    o3 = orientation(q1, q2, p1)
    o4 = orientation(q1, q2, p2)

    # Colinear - check overlap length > 0
    if o1 == 0 and o2 == 0 and o3 == 0 and o4 == 0:
        return colinear_overlap(p1, p2, q1, q2)

    # Proper crossing blocks
    if o1 != 0 and o2 != 0 and o3 != 0 and o4 != 0 and o1 != o2 and o3 != o4:
        return True

    return False


def colinear_overlap(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Return True if two colinear segments overlap with non-zero length."""
    if not (
        min(p1[0], p2[0]) - EPS <= max(q1[0], q2[0])
        and max(p1[0], p2[0]) + EPS >= min(q1[0], q2[0])
    ):
        return False
    if not (
        min(p1[1], p2[1]) - EPS <= max(q1[1], q2[1])
        and max(p1[1], p2[1]) + EPS >= min(q1[1], q2[1])
    ):
        return False
    # Compute overlap length on dominant axis
    if abs(p1[0] - p2[0]) >= abs(p1[1] - p2[1]):
        left = max(min(p1[0], p2[0]), min(q1[0], q2[0]))
        right = min(max(p1[0], p2[0]), max(q1[0], q2[0]))
    else:
        left = max(min(p1[1], p2[1]), min(q1[1], q2[1]))
        right = min(max(p1[1], p2[1]), max(q1[1], q2[1]))
    return right - left > EPS


def orientation(a: Point, b: Point, c: Point) -> int:
    """Return orientation of (a,b,c): 0 colinear, 1 clockwise, 2 counterclockwise."""
    val = (b[1] - a[1]) * (c[0] - a[0]) - (b[0] - a[0]) * (c[1] - a[1])
    if abs(val) < EPS:
        return 0
    return 1 if val > 0 else 2


def corner_sealed(a: Tile, b: Tile, walls: set[WallEdge]) -> bool:
    """True if any wall meets the vertex shared by diagonal neighbours ``a`` and ``b``.

    The four edges around the vertex are the two sides of ``a`` facing the
    step and the two sides of ``b`` facing back, so the result does not
    depend on the direction of travel.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return (
        wall_blocks(a, (a[0] + dx, a[1]), walls)
        or wall_blocks(a, (a[0], a[1] + dy), walls)
        or wall_blocks(b, (b[0] - dx, b[1]), walls)
        or wall_blocks(b, (b[0], b[1] - dy), walls)
    )


def lattice_crossings(a: Tile, b: Tile) -> Iterator[tuple[Tile, Tile]]:
    """Yield (before, after) tile pairs where the centre line a->b passes a grid vertex.

    Only vertices strictly between the two centres are reported. The pair is
    the diagonal step the line takes through that vertex.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if dx == 0 or dy == 0:
        return
    sx = 1 if dx > 0 else -1
    sy = 1 if dy > 0 else -1
    ax, ay = tile_center(a)
    for step in range(1, abs(dx) + 1):
        vx = a[0] + (step if sx > 0 else 1 - step)
        t = (vx - ax) / dx
        vy = ay + t * dy
        if abs(vy - round(vy)) > EPS:
            continue
        vy_int = int(round(vy))
        before = (vx - 1 if sx > 0 else vx, vy_int - 1 if sy > 0 else vy_int)
        yield before, (before[0] + sx, before[1] + sy)


def los_clear(a: Tile, b: Tile, walls: Iterable[WallEdge]) -> bool:
    """True if the centre-to-centre line from a to b crosses no wall edge.

    A line that slips through a grid vertex is blocked when any wall meets
    that vertex, so corners cannot be peeked through from either side.
    """
    if a == b:
        return True
    walls = set(walls)
    if not walls:
        return True
    seg = (tile_center(a), tile_center(b))
    for wall in walls:
        if segment_intersection_blocks(seg, wall.segment()):
            return False
    for before, after in lattice_crossings(a, b):
        if corner_sealed(before, after, walls):
            return False
    return True


def chebyshev(a: Tile, b: Tile) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def manhattan(a: Tile, b: Tile) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Tile, b: Tile) -> int:
    """Euclidean distance rounded up to whole tiles."""
    return math.ceil(math.hypot(a[0] - b[0], a[1] - b[1]) - EPS)


_METRICS = {
    "chebyshev": chebyshev,
    "manhattan": manhattan,
    "euclidean": euclidean,
}


def distance_fn(metric: str):
    try:
        return _METRICS[metric]
    except KeyError:
        raise ValueError(
            f"Unknown distance metric {metric!r}; expected one of {', '.join(DISTANCE_METRICS)}"
        ) from None

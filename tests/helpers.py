from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from delve.util.coordinates import Position
from delve.world.grid import Grid, Material, TileFlags

FLOOR = Material("Floor", "floor")
WALL = Material("Wall", "wall", TileFlags.SOLID)


def floor_positions(grid: Grid) -> set[Position]:
    return grid.positions_with(FLOOR)


def wall_positions(grid: Grid) -> set[Position]:
    return grid.positions_with(WALL)


def reachable_from(start: Position, walkable: set[Position]) -> set[Position]:
    """4-connected flood fill over `walkable`."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            nxt = Position(nx, ny)
            if nxt in walkable and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def tile_snapshot(grid: Grid) -> dict[Position, str]:
    """Position -> resource name, for comparing two grids."""
    return {pos: tile.material.resource_name for pos, tile in grid.tiles.items()}


def connected_room_count(room_count: int, pairs: Iterable[tuple[int, int]]) -> int:
    """Number of rooms reachable from room 0 over undirected `pairs`."""
    neighbours: dict[int, set[int]] = {i: set() for i in range(room_count)}
    for a, b in pairs:
        neighbours[a].add(b)
        neighbours[b].add(a)
    seen = {0}
    stack = [0]
    while stack:
        for nxt in neighbours[stack.pop()]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return len(seen)

"""Wall synthesis around every floor region."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.util.coordinates import Position
    from delve.world.grid import Grid, Material

logger = logging.getLogger(__name__)


def find_wall_positions(grid: Grid, floor: Material) -> list[Position]:
    """Empty cells in the Moore neighbourhood of any floor tile.

    Read-only. Positions are deduplicated and kept in first-seen order.
    """
    found: dict[Position, None] = {}
    for tile in grid.existing_tiles():
        if tile.material is not floor:
            continue
        for pos, neighbour in grid.moore_neighbours(tile.position):
            if neighbour is None:
                found[pos] = None
    return list(found)


def synthesize_walls(grid: Grid, floor: Material, wall: Material) -> list[Position]:
    """Surround every floor tile with wall on all empty neighbouring cells.

    The scan completes before the first wall is written; the commit reads no
    neighbour state.

    Returns the positions that received a wall.
    """
    positions = find_wall_positions(grid, floor)
    for pos in positions:
        grid.place_tile(pos, wall)

    logger.debug(f"Placed {len(positions)} wall tiles")
    return positions

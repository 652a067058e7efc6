"""Rasterize rooms and corridor segments into floor tiles."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.util.coordinates import Rect
    from delve.world.grid import Grid, Material
    from delve.worldgen.corridors import Segment


def paint_corridors(grid: Grid, segments: Iterable[Segment], floor: Material) -> None:
    """Write each corridor leg as floor.

    fill_box excludes its max corner, so the box starting one step past
    `start` plus the tile at `start` covers the leg up to its far end. The far
    end is the next leg's start or lies inside the target room.
    """
    for segment in segments:
        grid.fill_box(segment.start + (1, 1), segment.end, floor)
        grid.place_tile(segment.start, floor)


def paint_rooms(grid: Grid, rooms: Iterable[Rect], floor: Material) -> None:
    """Fill every room's half-open extent with floor."""
    for room in rooms:
        grid.fill_box(room.min, room.max, floor)

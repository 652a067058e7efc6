"""
Sparse tile grid that generators sculpt into.

This module defines:
- `TileFlags`: Intrinsic behaviour bits of a material (solid or passthrough).
- `Material`: A shared, immutable descriptor of a kind of tile. Materials are
  flyweights: every tile of a kind references the same `Material` object, and
  two materials are the same only if they are the same object.
- `Tile`: A placed cell with a position, a material, and an occupier slot.
- `Grid`: A sparse position -> tile mapping with box fills and neighbour
  queries. Positions without a tile are simply absent; the grid has no fixed
  extent.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from delve.util.coordinates import Position, as_position, normalize_corners

if TYPE_CHECKING:
    from delve.types import Direction, PositionLike

logger = logging.getLogger(__name__)


class TileFlags(enum.IntFlag):
    PASSTHROUGH = 0
    SOLID = 1


@dataclass(frozen=True, eq=False)
class Material:
    """What a tile is made of.

    Equality and hashing are by identity, so a floor and a wall with
    identical names are still distinct materials.
    """

    display_name: str
    resource_name: str
    flags: TileFlags = TileFlags.PASSTHROUGH

    @property
    def is_solid(self) -> bool:
        return bool(self.flags & TileFlags.SOLID)

    def __repr__(self) -> str:
        return f"Material({self.resource_name!r})"


@dataclass(eq=False)
class Tile:
    position: Position
    material: Material
    occupier: object | None = field(default=None)

    @property
    def is_occupied(self) -> bool:
        return self.occupier is not None

    @property
    def flags(self) -> TileFlags:
        return self.material.flags


# Clockwise from north; +y is north.
NEUMANN_OFFSETS: tuple[Direction, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
MOORE_OFFSETS: tuple[Direction, ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


class Grid:
    """Sparse tile storage keyed by position."""

    def __init__(self) -> None:
        self.tiles: dict[Position, Tile] = {}

    def __len__(self) -> int:
        return len(self.tiles)

    def __contains__(self, position: object) -> bool:
        return position in self.tiles

    def tile_at(self, position: PositionLike) -> Tile | None:
        return self.tiles.get(as_position(position))

    def place_tile(self, position: PositionLike, material: Material) -> Tile | None:
        """Write a fresh tile at `position`, returning the tile it displaced."""
        pos = as_position(position)
        displaced = self.tiles.get(pos)
        self.tiles[pos] = Tile(position=pos, material=material)
        return displaced

    def remove_tile(self, position: PositionLike) -> Tile | None:
        return self.tiles.pop(as_position(position), None)

    def fill_box(
        self, start: PositionLike, end: PositionLike, material: Material
    ) -> None:
        """Fill the box spanned by two corners with `material`.

        The corners are normalized into min/max per axis first; the max corner
        is exclusive, so fill_box((0, 0), (3, 2), m) writes 3x2 tiles.
        """
        lo, hi = normalize_corners(start, end)
        for y in range(lo.y, hi.y):
            for x in range(lo.x, hi.x):
                self.place_tile(Position(x, y), material)

    def fill_bordered_box(
        self,
        start: PositionLike,
        end: PositionLike,
        fill: Material,
        border: Material,
    ) -> None:
        """Fill a box like fill_box and surround it with a one-tile border ring."""
        lo, hi = normalize_corners(start, end)
        self.fill_box(lo, hi, fill)

        for y in range(lo.y - 1, hi.y + 1):
            self.place_tile((lo.x - 1, y), border)
            self.place_tile((hi.x, y), border)
        for x in range(lo.x, hi.x):
            self.place_tile((x, lo.y - 1), border)
            self.place_tile((x, hi.y), border)

    def _neighbours(
        self, at: PositionLike, offsets: tuple[Direction, ...]
    ) -> list[tuple[Position, Tile | None]]:
        at = as_position(at)
        result = []
        for offset in offsets:
            pos = at + offset
            result.append((pos, self.tiles.get(pos)))
        return result

    def neumann_neighbours(
        self, at: PositionLike
    ) -> list[tuple[Position, Tile | None]]:
        """The 4 orthogonal neighbours of `at` (N, E, S, W) and their tiles."""
        return self._neighbours(at, NEUMANN_OFFSETS)

    def moore_neighbours(self, at: PositionLike) -> list[tuple[Position, Tile | None]]:
        """The 8 neighbours of `at`, clockwise from north, and their tiles."""
        return self._neighbours(at, MOORE_OFFSETS)

    def existing_tiles(self) -> list[Tile]:
        """Snapshot of every placed tile.

        A list rather than a live view, so writing to the grid afterwards
        does not disturb an iteration over the result.
        """
        return list(self.tiles.values())

    def positions_with(self, material: Material) -> set[Position]:
        return {pos for pos, tile in self.tiles.items() if tile.material is material}

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.existing_tiles())

    def clear(self) -> None:
        if self.tiles:
            logger.debug(f"Clearing grid of {len(self.tiles)} tiles")
        self.tiles.clear()

"""Dungeon-style sculptor: rooms joined by a spanning tree of elbow corridors.

Generation runs in stages, each feeding the next:

1. Place N non-overlapping rooms by rejection sampling.
2. Triangulate the room centroids into a candidate graph.
3. Take its minimum spanning tree and join each tree edge with an elbow
   corridor; every room is now reachable.
4. Add 0-4 extra elbow corridors between random rooms to create loops.
5. Paint corridors and rooms as floor.
6. Wall in every empty cell next to a floor tile.

Stages 1-4 only build in-memory data, so a failure there leaves the grid
untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from delve import config
from delve.util import rng
from delve.util.coordinates import Position, Rect, as_position
from delve.util.performance import measure, measure_block

from .base import Sculptor
from .corridors import Segment, plan_extra_corridors, plan_tree_corridors
from .graph import Edge, build_room_graph, minimum_spanning_tree
from .painter import paint_corridors, paint_rooms
from .rooms import place_rooms
from .walls import synthesize_walls

if TYPE_CHECKING:
    from delve.types import PositionLike, RoomIndex
    from delve.util.rng import RNG
    from delve.world.grid import Grid, Material

logger = logging.getLogger(__name__)


class DungeonConfigError(ValueError):
    """Raised for a DungeonSculptor configuration that can never work."""


@dataclass
class DungeonLayout:
    """Everything one generation decided, in the order it was decided.

    Attributes:
        rooms: Accepted rooms; list index is the room index used by edges.
        edges: Candidate graph from the triangulation, cheapest first.
        tree: Spanning tree edges chosen from `edges`.
        corridors: All corridor segments, tree corridors first, then loops.
        extra_connections: Room index pairs joined by the loop corridors.
        walls: Positions that received a wall (empty until painted).
    """

    rooms: list[Rect]
    edges: list[Edge]
    tree: list[Edge]
    corridors: list[Segment]
    extra_connections: list[tuple[RoomIndex, RoomIndex]] = field(
        default_factory=list
    )
    walls: list[Position] = field(default_factory=list)

    @property
    def tree_corridors(self) -> list[Segment]:
        return self.corridors[: 2 * len(self.tree)]

    @property
    def extra_corridors(self) -> list[Segment]:
        return self.corridors[2 * len(self.tree) :]


class DungeonSculptor(Sculptor):
    """Carves a walled rooms-and-corridors dungeon into a grid."""

    def __init__(
        self,
        room_amount: int,
        room_size: tuple[PositionLike, PositionLike],
        floor: Material,
        wall: Material,
        *,
        rng: RNG | None = None,
        max_trials: int = config.DUNGEON_MAX_PLACEMENT_TRIALS,
        max_extra_corridors: int = config.DUNGEON_MAX_EXTRA_CORRIDORS,
    ) -> None:
        """
        Args:
            room_amount: Number of rooms to place; must be positive.
            room_size: (min_size, max_size) room extents. Sizes are drawn from
                [min_size, max_size) per axis.
            floor: Material written for rooms and corridors.
            wall: Material written around them.
            rng: Random source for every decision. Defaults to the
                "worldgen.dungeon" stream of the global provider.
            max_trials: Candidate rooms drawn per room before giving up.
            max_extra_corridors: Upper bound on loop corridors.

        Raises:
            DungeonConfigError: if the configuration is invalid.
        """
        if isinstance(room_amount, bool) or not isinstance(room_amount, int):
            raise DungeonConfigError(
                f"room_amount must be an int, got {type(room_amount).__name__}"
            )
        if room_amount < 1:
            raise DungeonConfigError(f"room_amount must be positive, got {room_amount}")

        min_size, max_size = (as_position(s) for s in room_size)
        if min_size.x < 1 or min_size.y < 1:
            raise DungeonConfigError(
                f"Minimum room size must be at least 1, got {min_size}"
            )
        if min_size.x > max_size.x or min_size.y > max_size.y:
            raise DungeonConfigError(
                f"Minimum room size {min_size} exceeds maximum {max_size}"
            )
        if max_trials < 1:
            raise DungeonConfigError(f"max_trials must be positive, got {max_trials}")
        if max_extra_corridors < 0:
            raise DungeonConfigError(
                f"max_extra_corridors cannot be negative, got {max_extra_corridors}"
            )

        self.room_amount = room_amount
        self.min_room_size = min_size
        self.max_room_size = max_size
        self.floor = floor
        self.wall = wall
        self.max_trials = max_trials
        self.max_extra_corridors = max_extra_corridors
        self.rng: RNG = rng if rng is not None else _default_rng()

    @measure("dungeon.plan")
    def plan(self, start: PositionLike, end: PositionLike) -> DungeonLayout:
        """Decide rooms and corridors for [start, end) without touching a grid.

        Raises:
            RoomPlacementError: if the rooms do not fit.
        """
        with measure_block("dungeon.rooms"):
            rooms = place_rooms(
                start,
                end,
                self.min_room_size,
                self.max_room_size,
                self.room_amount,
                self.rng,
                self.max_trials,
            )

        with measure_block("dungeon.graph"):
            edges = build_room_graph(rooms)
            tree = minimum_spanning_tree(len(rooms), edges)

        with measure_block("dungeon.corridors"):
            corridors = plan_tree_corridors(rooms, tree, self.rng)
            extra_pairs, extra_segments = plan_extra_corridors(
                rooms, self.rng, self.max_extra_corridors
            )
            corridors.extend(extra_segments)

        return DungeonLayout(
            rooms=rooms,
            edges=edges,
            tree=tree,
            corridors=corridors,
            extra_connections=extra_pairs,
        )

    @measure("dungeon.sculpt")
    def sculpt(
        self, start: PositionLike, end: PositionLike, grid: Grid
    ) -> DungeonLayout:
        """Plan a dungeon for [start, end) and carve it into `grid`."""
        layout = self.plan(start, end)

        with measure_block("dungeon.paint"):
            paint_corridors(grid, layout.corridors, self.floor)
            paint_rooms(grid, layout.rooms, self.floor)

        with measure_block("dungeon.walls"):
            layout.walls = synthesize_walls(grid, self.floor, self.wall)

        logger.info(
            f"Sculpted dungeon in {as_position(start)}..{as_position(end)}: "
            f"{len(layout.rooms)} rooms, {len(layout.tree)} tree corridors, "
            f"{len(layout.extra_connections)} extra corridors, "
            f"{len(layout.walls)} walls"
        )
        return layout


def _default_rng() -> RNG:
    return rng.get(config.DUNGEON_RNG_DOMAIN)

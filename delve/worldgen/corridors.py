"""Elbow corridors along the spanning tree, plus a few extra loops."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

from delve import config
from delve.util.coordinates import Position, Rect, as_position

if TYPE_CHECKING:
    from delve.types import PositionLike, RoomIndex
    from delve.util.rng import RNG
    from delve.worldgen.graph import Edge

logger = logging.getLogger(__name__)


class Segment(NamedTuple):
    """One straight, axis-aligned leg of a corridor."""

    start: Position
    end: Position


def elbow_point(a: PositionLike, b: PositionLike, rng: RNG) -> Position:
    """Turning point of an L-shaped corridor from a to b.

    A coin flip picks (a.x, b.y) or (b.x, a.y), so the point always shares
    one axis with each endpoint.
    """
    a, b = as_position(a), as_position(b)
    if bool(rng.getrandbits(1)):
        return Position(a.x, b.y)
    return Position(b.x, a.y)


def elbow_corridor(a: PositionLike, b: PositionLike, rng: RNG) -> list[Segment]:
    """Two segments a -> elbow -> b."""
    a, b = as_position(a), as_position(b)
    elbow = elbow_point(a, b, rng)
    return [Segment(a, elbow), Segment(elbow, b)]


def plan_tree_corridors(
    rooms: Sequence[Rect], tree: Sequence[Edge], rng: RNG
) -> list[Segment]:
    """One elbow corridor between the centres of each tree edge's rooms."""
    segments: list[Segment] = []
    for edge in tree:
        segments.extend(elbow_corridor(rooms[edge.a].center, rooms[edge.b].center, rng))
    return segments


def plan_extra_corridors(
    rooms: Sequence[Rect],
    rng: RNG,
    max_extra: int = config.DUNGEON_MAX_EXTRA_CORRIDORS,
) -> tuple[list[tuple[RoomIndex, RoomIndex]], list[Segment]]:
    """Add 0..max_extra random room-to-room corridors to break up the tree.

    Returns the connected room pairs and their segments. Layouts with fewer
    than two rooms get nothing.
    """
    if len(rooms) < 2:
        return [], []

    pairs: list[tuple[RoomIndex, RoomIndex]] = []
    segments: list[Segment] = []
    for _ in range(rng.randint(0, max_extra)):
        a = rng.randrange(len(rooms))
        b = rng.randrange(len(rooms))
        while b == a:
            b = rng.randrange(len(rooms))
        pairs.append((a, b))
        segments.extend(elbow_corridor(rooms[a].center, rooms[b].center, rng))

    logger.debug(f"Added {len(pairs)} extra corridors")
    return pairs, segments

"""Rejection-sampled placement of non-overlapping rectangular rooms."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve import config
from delve.util.coordinates import Position, Rect, as_position

if TYPE_CHECKING:
    from delve.types import PositionLike
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)


class RoomPlacementError(Exception):
    """Raised when the requested rooms cannot be placed in the given area.

    Either no room of the configured size range can ever fit, or every
    candidate for one room was rejected until the trial budget ran out.
    """

    def __init__(
        self, message: str, *, placed: int, requested: int, max_trials: int
    ) -> None:
        super().__init__(message)
        self.placed = placed
        self.requested = requested
        self.max_trials = max_trials


def _draw_extent(rng: RNG, lo: int, hi: int) -> int:
    """Uniform draw from [lo, hi), or exactly lo when the range is empty."""
    if hi <= lo:
        return lo
    return rng.randrange(lo, hi)


def place_rooms(
    start: PositionLike,
    end: PositionLike,
    min_size: PositionLike,
    max_size: PositionLike,
    count: int,
    rng: RNG,
    max_trials: int = config.DUNGEON_MAX_PLACEMENT_TRIALS,
) -> list[Rect]:
    """Place `count` pairwise non-overlapping rooms inside [start, end).

    Each candidate gets a corner drawn uniformly from the area and a size
    drawn uniformly from [min_size, max_size) per axis. Candidates that
    stick out of the area or overlap an accepted room are redrawn, up to
    `max_trials` times per room.

    Raises:
        RoomPlacementError: if the area is empty or narrower than max_size on
            either axis, or if the trial budget for a room runs out.
    """
    start, end = as_position(start), as_position(end)
    min_size, max_size = as_position(min_size), as_position(max_size)

    area_w = end.x - start.x
    area_h = end.y - start.y
    if (
        area_w <= 0
        or area_h <= 0
        or max(min_size.x, max_size.x) > area_w
        or max(min_size.y, max_size.y) > area_h
    ):
        raise RoomPlacementError(
            f"Rooms up to {max_size} cannot fit in area {start}..{end}",
            placed=0,
            requested=count,
            max_trials=max_trials,
        )

    rooms: list[Rect] = []
    total_trials = 0
    for _ in range(count):
        for _trial in range(max_trials):
            total_trials += 1
            corner = Position(
                rng.randrange(start.x, end.x), rng.randrange(start.y, end.y)
            )
            size = Position(
                _draw_extent(rng, min_size.x, max_size.x),
                _draw_extent(rng, min_size.y, max_size.y),
            )
            candidate = Rect.from_size(corner, size)

            if not candidate.within(start, end):
                continue
            if any(room.overlaps(candidate) for room in rooms):
                continue

            rooms.append(candidate)
            break
        else:
            raise RoomPlacementError(
                f"Gave up placing room {len(rooms) + 1} of {count} "
                f"after {max_trials} trials",
                placed=len(rooms),
                requested=count,
                max_trials=max_trials,
            )

    logger.debug(f"Placed {len(rooms)} rooms in {total_trials} trials")
    return rooms

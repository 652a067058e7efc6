"""Integer grid positions and axis-aligned rectangles in tile coordinates."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from delve.types import PointF, PositionLike, TileCoord


class Position(NamedTuple):
    """A tile position on the grid.

    Ordering is lexicographic (x first, then y), inherited from tuple.
    Arithmetic accepts another Position or any (x, y) pair.
    """

    x: TileCoord
    y: TileCoord

    def __add__(self, other: PositionLike) -> Position:  # type: ignore[override]
        ox, oy = other
        return Position(self.x + ox, self.y + oy)

    __radd__ = __add__

    def __sub__(self, other: PositionLike) -> Position:
        ox, oy = other
        return Position(self.x - ox, self.y - oy)

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"


def as_position(value: PositionLike) -> Position:
    """Coerce a Position or an (x, y) pair of ints into a Position."""
    if isinstance(value, Position):
        return value
    x, y = value
    return Position(int(x), int(y))


def normalize_corners(
    a: PositionLike, b: PositionLike
) -> tuple[Position, Position]:
    """Return (min, max) corners of the box spanned by two arbitrary corners."""
    a, b = as_position(a), as_position(b)
    return (
        Position(min(a.x, b.x), min(a.y, b.y)),
        Position(max(a.x, b.x), max(a.y, b.y)),
    )


class Rect:
    """Rectangle/bounding box in tile coordinates.

    The tile extent is half-open: a Rect covers every position p with
    min.x <= p.x < max.x and min.y <= p.y < max.y.
    """

    __slots__ = ("max", "min")

    def __init__(self, min_corner: PositionLike, max_corner: PositionLike) -> None:
        self.min: Position = as_position(min_corner)
        self.max: Position = as_position(max_corner)
        if self.max.x < self.min.x or self.max.y < self.min.y:
            raise ValueError(f"Rect max corner {self.max} is below min {self.min}")

    @classmethod
    def from_size(cls, corner: PositionLike, size: PositionLike) -> Rect:
        """Create a Rect from its min corner and a (width, height) extent."""
        corner = as_position(corner)
        return cls(corner, corner + size)

    @property
    def width(self) -> TileCoord:
        return self.max.x - self.min.x

    @property
    def height(self) -> TileCoord:
        return self.max.y - self.min.y

    @property
    def size(self) -> Position:
        return Position(self.width, self.height)

    @property
    def centroid(self) -> PointF:
        """Geometric centre as real coordinates."""
        return ((self.min.x + self.max.x) / 2, (self.min.y + self.max.y) / 2)

    @property
    def center(self) -> Position:
        """Integer tile at the centre; inside the rect whenever it is non-empty."""
        return Position((self.min.x + self.max.x) // 2, (self.min.y + self.max.y) // 2)

    def overlaps(self, other: Rect) -> bool:
        """True when the two rects share at least one tile.

        Rects that only touch along an edge do not overlap.
        """
        return (
            self.min.x < other.max.x
            and other.min.x < self.max.x
            and self.min.y < other.max.y
            and other.min.y < self.max.y
        )

    def contains(self, position: PositionLike) -> bool:
        x, y = position
        return self.min.x <= x < self.max.x and self.min.y <= y < self.max.y

    def within(self, start: PositionLike, end: PositionLike) -> bool:
        """True when this rect lies entirely inside the half-open area [start, end)."""
        start, end = as_position(start), as_position(end)
        return (
            self.min.x >= start.x
            and self.min.y >= start.y
            and self.max.x <= end.x
            and self.max.y <= end.y
        )

    def positions(self) -> Iterator[Position]:
        for y in range(self.min.y, self.max.y):
            for x in range(self.min.x, self.max.x):
                yield Position(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def __repr__(self) -> str:
        return (
            f"Rect(x1={self.min.x}, y1={self.min.y}, "
            f"x2={self.max.x}, y2={self.max.y})"
        )

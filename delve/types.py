from __future__ import annotations

from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from delve.util.coordinates import Position

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Anything an API accepts where a grid position is expected: a Position or a
# plain (x, y) pair.
PositionLike: TypeAlias = "Position | tuple[int, int]"

# Real-valued point, e.g. the geometric centre of a room.
PointF: TypeAlias = tuple[float, float]

# Directions - discrete grid steps
UnitStep: TypeAlias = Literal[-1, 0, 1]
Direction: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (-1, 0) = westward step

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed: TypeAlias = int | str | None

# Index of a room within a generated layout's room list.
RoomIndex: TypeAlias = int

"""Base class for world sculptors."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.types import PositionLike
    from delve.world.grid import Grid


class Sculptor(abc.ABC):
    """Abstract base class for algorithms that carve structure into a grid.

    A sculptor is handed an area and a grid it may write to for the duration
    of one call. It owns no tiles itself.
    """

    @abc.abstractmethod
    def sculpt(self, start: PositionLike, end: PositionLike, grid: Grid) -> object:
        """Carve the half-open area [start, end) of `grid` in place."""
        raise NotImplementedError

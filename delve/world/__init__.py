"""Grid storage the world generators write into."""

from .grid import Grid, Material, Tile, TileFlags

__all__ = [
    "Grid",
    "Material",
    "Tile",
    "TileFlags",
]

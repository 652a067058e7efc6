"""World generation algorithms for Delve.

This package provides:
- DungeonSculptor: Rooms joined by a minimum spanning tree of elbow corridors,
  with a few extra loops, walled in on every side

and the stages it is built from, usable on their own:
- place_rooms: Rejection-sampled non-overlapping rooms
- build_room_graph / minimum_spanning_tree: Delaunay candidate graph + Kruskal
- plan_tree_corridors / plan_extra_corridors: Elbow corridor planning
- paint_rooms / paint_corridors: Floor rasterization
- synthesize_walls: Two-phase wall placement around floor
"""

from .base import Sculptor
from .corridors import (
    Segment,
    elbow_corridor,
    elbow_point,
    plan_extra_corridors,
    plan_tree_corridors,
)
from .dungeon import DungeonConfigError, DungeonLayout, DungeonSculptor
from .graph import Edge, build_room_graph, minimum_spanning_tree
from .painter import paint_corridors, paint_rooms
from .rooms import RoomPlacementError, place_rooms
from .walls import find_wall_positions, synthesize_walls

__all__ = [
    "DungeonConfigError",
    "DungeonLayout",
    "DungeonSculptor",
    "Edge",
    "RoomPlacementError",
    "Sculptor",
    "Segment",
    "build_room_graph",
    "elbow_corridor",
    "elbow_point",
    "find_wall_positions",
    "minimum_spanning_tree",
    "paint_corridors",
    "paint_rooms",
    "place_rooms",
    "plan_extra_corridors",
    "plan_tree_corridors",
    "synthesize_walls",
]

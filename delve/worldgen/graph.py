"""Room connectivity graph and its minimum spanning tree.

The candidate graph comes from a Delaunay triangulation over room centroids:
each triangle contributes its three sides, so every room is linked to its
spatial neighbours without the quadratic edge count of a complete graph.
Kruskal's algorithm then picks the cheapest acyclic subset that still
connects every room.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from scipy.spatial import Delaunay, QhullError

from delve.util.coordinates import Rect

if TYPE_CHECKING:
    from delve.types import RoomIndex

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """Undirected link between two rooms, `a < b`."""

    a: RoomIndex
    b: RoomIndex
    weight: int


def squared_distance(first: Rect, second: Rect) -> int:
    """Squared distance between the integer `center` tiles of two rooms.

    Edge weights use tile centres; the triangulation itself runs on the
    real-valued `centroid`.
    """
    ax, ay = first.center
    bx, by = second.center
    return (ax - bx) ** 2 + (ay - by) ** 2


def _make_edge(rooms: Sequence[Rect], i: int, j: int) -> Edge:
    a, b = (i, j) if i < j else (j, i)
    return Edge(a, b, squared_distance(rooms[a], rooms[b]))


def _sorted_edges(edges: Iterable[Edge]) -> list[Edge]:
    return sorted(edges, key=lambda e: (e.weight, e.a, e.b))


def complete_graph(rooms: Sequence[Rect]) -> list[Edge]:
    """Every pair of rooms, cheapest first."""
    return _sorted_edges(
        _make_edge(rooms, i, j) for i, j in itertools.combinations(range(len(rooms)), 2)
    )


def triangle_edges(simplices: np.ndarray) -> set[tuple[int, int]]:
    """Deduplicated sides of a triangle index array, as sorted index pairs."""
    pairs: set[tuple[int, int]] = set()
    for tri in simplices:
        i, j, k = (int(v) for v in tri)
        for u, v in ((i, j), (j, k), (k, i)):
            pairs.add((u, v) if u < v else (v, u))
    return pairs


def build_room_graph(rooms: Sequence[Rect]) -> list[Edge]:
    """Candidate corridor edges between spatially neighbouring rooms.

    Fewer than two rooms yield no edges and two rooms a single edge. When the
    centroids cannot be triangulated (all collinear) the complete graph is
    used instead.
    """
    n = len(rooms)
    if n < 2:
        return []
    if n == 2:
        return [_make_edge(rooms, 0, 1)]

    points = np.array([room.centroid for room in rooms], dtype=np.float64)
    try:
        triangulation = Delaunay(points)
    except QhullError:
        logger.warning(
            f"Could not triangulate {n} room centroids; connecting every pair"
        )
        return complete_graph(rooms)

    pairs = triangle_edges(triangulation.simplices)
    covered = {v for pair in pairs for v in pair}
    if len(covered) < n:
        logger.warning(
            f"Triangulation skipped {n - len(covered)} of {n} rooms; "
            "connecting every pair"
        )
        return complete_graph(rooms)

    edges = _sorted_edges(_make_edge(rooms, a, b) for a, b in pairs)
    logger.debug(f"Triangulated {n} rooms into {len(edges)} candidate edges")
    return edges


class DisjointSet:
    """Union-find over the integers 0..size-1 with path halving."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.components = size

    def find(self, item: int) -> int:
        parent = self.parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b; False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_b] = root_a
        self.components -= 1
        return True


def minimum_spanning_tree(room_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Kruskal's algorithm over `edges`, cheapest first.

    Returns room_count - 1 edges when the candidate graph is connected.
    """
    if room_count < 2:
        return []

    sets = DisjointSet(room_count)
    tree: list[Edge] = []
    for edge in _sorted_edges(edges):
        if sets.union(edge.a, edge.b):
            tree.append(edge)
            if len(tree) == room_count - 1:
                break

    if sets.components > 1:
        logger.warning(
            f"Candidate graph leaves {sets.components} disconnected room groups"
        )
    return tree

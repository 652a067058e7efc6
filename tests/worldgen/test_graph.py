from __future__ import annotations

from random import Random

import numpy as np
import pytest

from delve.util.coordinates import Rect
from delve.worldgen.graph import (
    DisjointSet,
    Edge,
    build_room_graph,
    complete_graph,
    minimum_spanning_tree,
    squared_distance,
    triangle_edges,
)
from delve.worldgen.rooms import place_rooms
from tests.helpers import connected_room_count


def _room_at(x: int, y: int) -> Rect:
    """A 3x3 room whose centre tile is (x, y)."""
    return Rect((x - 1, y - 1), (x + 2, y + 2))


class TestBuildRoomGraph:
    def test_no_rooms_or_one_room_has_no_edges(self) -> None:
        assert build_room_graph([]) == []
        assert build_room_graph([_room_at(0, 0)]) == []

    def test_two_rooms_single_edge(self) -> None:
        edges = build_room_graph([_room_at(0, 0), _room_at(3, 4)])
        assert edges == [Edge(0, 1, 25)]

    def test_triangle_gives_three_edges(self) -> None:
        rooms = [_room_at(0, 0), _room_at(10, 0), _room_at(0, 10)]
        edges = build_room_graph(rooms)

        assert {(e.a, e.b) for e in edges} == {(0, 1), (0, 2), (1, 2)}
        assert all(e.a < e.b for e in edges)
        assert [e.weight for e in edges] == [100, 100, 200]

    def test_square_gets_one_diagonal(self) -> None:
        """Four corners of a rectangle triangulate into 4 sides + 1 diagonal."""
        rooms = [_room_at(0, 0), _room_at(20, 0), _room_at(20, 10), _room_at(0, 10)]
        edges = build_room_graph(rooms)

        assert len(edges) == 5
        sides = {(0, 1), (1, 2), (2, 3), (0, 3)}
        assert sides <= {(e.a, e.b) for e in edges}

    def test_collinear_rooms_fall_back_to_complete_graph(self) -> None:
        rooms = [_room_at(0, 0), _room_at(10, 0), _room_at(20, 0), _room_at(30, 0)]
        edges = build_room_graph(rooms)
        assert edges == complete_graph(rooms)
        assert len(edges) == 6

    def test_edges_sorted_by_weight(self) -> None:
        rooms = place_rooms((0, 0), (60, 60), (3, 3), (7, 7), 12, Random(5))
        edges = build_room_graph(rooms)

        weights = [e.weight for e in edges]
        assert weights == sorted(weights)
        assert len({(e.a, e.b) for e in edges}) == len(edges)

    def test_weights_are_squared_centre_distances(self) -> None:
        rooms = place_rooms((0, 0), (60, 60), (3, 3), (7, 7), 10, Random(11))
        for edge in build_room_graph(rooms):
            assert edge.weight == squared_distance(rooms[edge.a], rooms[edge.b])
            assert isinstance(edge.weight, int)

    @pytest.mark.parametrize("seed", range(8))
    def test_candidate_graph_is_connected(self, seed: int) -> None:
        rooms = place_rooms((0, 0), (50, 50), (3, 3), (7, 7), 9, Random(seed))
        edges = build_room_graph(rooms)
        assert connected_room_count(len(rooms), [(e.a, e.b) for e in edges]) == 9


def test_squared_distance_uses_centre_tiles() -> None:
    first, second = Rect((0, 0), (3, 3)), Rect((5, 0), (9, 4))

    assert first.center == (1, 1)
    assert second.center == (7, 2)
    assert squared_distance(first, second) == 37


class TestTriangleEdges:
    def test_shared_sides_are_deduplicated(self) -> None:
        simplices = np.array([[0, 1, 2], [2, 1, 3]])
        assert triangle_edges(simplices) == {(0, 1), (0, 2), (1, 2), (1, 3), (2, 3)}


class TestDisjointSet:
    def test_union_and_find(self) -> None:
        sets = DisjointSet(4)

        assert sets.union(0, 1)
        assert sets.union(2, 3)
        assert not sets.union(1, 0)
        assert sets.find(0) == sets.find(1)
        assert sets.find(0) != sets.find(2)
        assert sets.components == 2

        assert sets.union(1, 3)
        assert sets.components == 1


class TestMinimumSpanningTree:
    def test_picks_cheapest_acyclic_edges(self) -> None:
        edges = [
            Edge(0, 1, 1),
            Edge(1, 2, 2),
            Edge(0, 2, 3),
            Edge(2, 3, 10),
            Edge(1, 3, 4),
        ]
        tree = minimum_spanning_tree(4, edges)

        assert tree == [Edge(0, 1, 1), Edge(1, 2, 2), Edge(1, 3, 4)]

    def test_degenerate_room_counts(self) -> None:
        assert minimum_spanning_tree(0, []) == []
        assert minimum_spanning_tree(1, []) == []
        assert minimum_spanning_tree(2, [Edge(0, 1, 9)]) == [Edge(0, 1, 9)]

    def test_disconnected_graph_returns_forest(self) -> None:
        tree = minimum_spanning_tree(4, [Edge(0, 1, 1), Edge(2, 3, 1)])
        assert len(tree) == 2

    @pytest.mark.parametrize("count", [1, 2, 3, 5, 12])
    def test_tree_has_n_minus_one_edges_and_spans(self, count: int) -> None:
        rooms = place_rooms((0, 0), (80, 80), (3, 3), (7, 7), count, Random(count))
        tree = minimum_spanning_tree(count, build_room_graph(rooms))

        assert len(tree) == count - 1
        assert connected_room_count(count, [(e.a, e.b) for e in tree]) == count

from __future__ import annotations

import itertools
from random import Random

import pytest

from delve.util.coordinates import Rect
from delve.worldgen.rooms import RoomPlacementError, place_rooms


@pytest.mark.parametrize("seed", range(10))
def test_rooms_do_not_overlap_and_fit(seed: int) -> None:
    rooms = place_rooms((0, 0), (40, 30), (3, 3), (8, 8), 8, Random(seed))

    assert len(rooms) == 8
    for room in rooms:
        assert room.within((0, 0), (40, 30))
        assert 3 <= room.width < 8
        assert 3 <= room.height < 8
    for first, second in itertools.combinations(rooms, 2):
        assert not first.overlaps(second)


def test_area_offset_from_origin() -> None:
    rooms = place_rooms((-50, 100), (-20, 130), (2, 2), (5, 5), 4, Random(3))
    assert all(room.within((-50, 100), (-20, 130)) for room in rooms)


def test_equal_min_and_max_size_gives_fixed_size() -> None:
    rooms = place_rooms((0, 0), (30, 30), (4, 2), (4, 2), 5, Random(1))
    assert all(room.size == (4, 2) for room in rooms)


def test_same_seed_same_rooms() -> None:
    first = place_rooms((0, 0), (30, 30), (3, 3), (6, 6), 5, Random(99))
    second = place_rooms((0, 0), (30, 30), (3, 3), (6, 6), 5, Random(99))
    assert first == second


def test_room_larger_than_area_fails_immediately() -> None:
    with pytest.raises(RoomPlacementError) as excinfo:
        place_rooms((0, 0), (20, 20), (3, 3), (30, 30), 3, Random(0))

    assert excinfo.value.placed == 0
    assert excinfo.value.requested == 3


@pytest.mark.parametrize("max_size", [(21, 5), (5, 21), (21, 21)])
def test_max_size_one_past_area_fails_immediately(max_size: tuple[int, int]) -> None:
    """Sizes are drawn below max_size, but max_size itself must still fit."""
    with pytest.raises(RoomPlacementError) as excinfo:
        place_rooms((0, 0), (20, 20), (3, 3), max_size, 3, Random(0))

    assert excinfo.value.placed == 0


def test_max_size_equal_to_area_is_accepted() -> None:
    rooms = place_rooms((0, 0), (20, 20), (3, 3), (20, 20), 1, Random(0))
    assert rooms[0].within((0, 0), (20, 20))


def test_empty_area_fails() -> None:
    with pytest.raises(RoomPlacementError):
        place_rooms((5, 5), (5, 10), (1, 1), (2, 2), 1, Random(0))


def test_crowded_area_exhausts_trials() -> None:
    """A 6x6 area cannot hold ten 3x3 rooms; the sampler must give up."""
    with pytest.raises(RoomPlacementError) as excinfo:
        place_rooms((0, 0), (6, 6), (3, 3), (3, 3), 10, Random(0), max_trials=200)

    error = excinfo.value
    assert error.placed < 10
    assert error.requested == 10
    assert error.max_trials == 200


def test_single_room_filling_the_area() -> None:
    rooms = place_rooms((0, 0), (4, 4), (4, 4), (4, 4), 1, Random(0), max_trials=10_000)
    assert rooms == [Rect((0, 0), (4, 4))]

import pytest

from poisson_disk.active_list import ActiveList
from poisson_disk.grid import SpatialGrid


def _committed(count):
    arena = []
    grid = SpatialGrid(2, 0.5, arena)
    for i in range(count):
        point = (float(i), float(i))
        arena.append(point)
        grid.insert(i, point)
    return ActiveList(grid)


def test_pop_returns_most_recent():
    active = _committed(3)
    for index in range(3):
        active.push(index)
    assert active.pop() == 2
    assert active.pop() == 1
    assert len(active) == 1


def test_push_front_goes_to_the_back_of_the_queue():
    active = _committed(3)
    active.push(1)
    active.push(2)
    active.push_front(0)
    assert list(active) == [0, 1, 2]
    assert active.pop() == 2


def test_rejects_indices_missing_from_grid():
    active = _committed(1)
    with pytest.raises(IndexError):
        active.push(5)
    with pytest.raises(IndexError):
        active.push_front(-1)
    assert len(active) == 0

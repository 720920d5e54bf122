import math

import numpy as np

from poisson_disk.grid import SpatialGrid, neighbourhood_offsets


def _grid_with(points, cell_size):
    arena = []
    grid = SpatialGrid(len(points[0]), cell_size, arena)
    for point in points:
        arena.append(point)
        grid.insert(len(arena) - 1, point)
    return grid, arena


def test_cell_of_floors_each_axis():
    grid = SpatialGrid(3, 0.5, [])
    assert grid.cell_of((0.0, 0.49, 1.0)) == (0, 0, 2)
    assert grid.cell_of((2.75, 0.5, 0.999)) == (5, 1, 1)


def test_neighbourhood_offsets_start_at_origin_and_keep_adjacent_cells():
    cell = 1 / math.sqrt(2)
    offsets = neighbourhood_offsets(2, 3, cell, 1.5)
    assert offsets[0] == (0, 0)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            assert (dx, dy) in offsets
    # far corners of the ring cannot hold a point within the radius
    assert (3, 3) not in offsets
    assert len(offsets) < 49


def test_neighbors_within_radius_never_misses_a_close_point():
    rng = np.random.default_rng(4)
    points = [tuple(float(v) for v in p) for p in rng.random((300, 2)) * 10.0]
    cell = 0.5 / math.sqrt(2)
    grid, arena = _grid_with(points, cell)

    for query in rng.random((40, 2)) * 10.0:
        found = set(grid.neighbors_within_radius(query, 1.0))
        expected = {i for i, p in enumerate(arena) if math.dist(query, p) <= 1.0}
        assert expected <= found


def test_points_sharing_a_cell_are_all_reported():
    grid, _ = _grid_with([(1.01, 1.01), (1.02, 1.02)], 0.5)
    assert sorted(grid.neighbors_within_radius((1.0, 1.0), 0.5)) == [0, 1]
    assert len(grid) == 2


def test_contains_and_clear():
    grid, _ = _grid_with([(0.1, 0.2, 0.3)], 0.25)
    assert grid.contains(0)
    assert not grid.contains(1)
    grid.clear()
    assert not grid.contains(0)
    assert list(grid.neighbors_within_radius((0.1, 0.2, 0.3), 1.0)) == []

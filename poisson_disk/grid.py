"""Uniform hyper-grid used to find the committed points near a location."""

from __future__ import annotations

import itertools
import math
from typing import Dict, Iterator, List, Sequence, Tuple

from .config import Point

Cell = Tuple[int, ...]


def neighbourhood_offsets(dimension: int, ring: int, cell_size: float, radius: float) -> List[Cell]:
    """Return the cell offsets within ``ring`` cells that may hold a point closer than ``radius``.

    An offset is kept when the gap between the query cell and the offset cell,
    ``(|o_i| - 1) * cell_size`` per axis, leaves room for a point within
    ``radius``. The origin offset comes first.
    """

    limit = radius * radius
    offsets: List[Cell] = []
    for offset in itertools.product(range(-ring, ring + 1), repeat=dimension):
        gap = 0.0
        for o in offset:
            if abs(o) > 1:
                gap += ((abs(o) - 1) * cell_size) ** 2
        if gap <= limit:
            offsets.append(offset)
    offsets.sort(key=lambda o: sum(v * v for v in o))
    return offsets


class SpatialGrid:
    """Sparse grid mapping integer cell coordinates to arena indices.

    Cells are sized ``min_distance / sqrt(N)`` so a cell's diagonal equals the
    minimum separation. Each cell keeps a list of indices: points inserted
    without a distance check can share a cell and none of them may be hidden
    from neighbour queries.
    """

    def __init__(self, dimension: int, cell_size: float, points: Sequence[Point]):
        self.dimension = dimension
        self.cell_size = cell_size
        self._points = points
        self._cells: Dict[Cell, List[int]] = {}
        self._offsets: Dict[Tuple[int, float], List[Cell]] = {}

    def __len__(self) -> int:
        return sum(len(indices) for indices in self._cells.values())

    def cell_of(self, point: Sequence[float]) -> Cell:
        return tuple(int(math.floor(coordinate / self.cell_size)) for coordinate in point)

    def insert(self, index: int, point: Point) -> Cell:
        cell = self.cell_of(point)
        self._cells.setdefault(cell, []).append(index)
        return cell

    def contains(self, index: int) -> bool:
        if not 0 <= index < len(self._points):
            return False
        return index in self._cells.get(self.cell_of(self._points[index]), ())

    def _offsets_for(self, radius: float) -> List[Cell]:
        ring = max(1, int(math.ceil(radius / self.cell_size)))
        key = (ring, radius)
        offsets = self._offsets.get(key)
        if offsets is None:
            offsets = neighbourhood_offsets(self.dimension, ring, self.cell_size, radius)
            self._offsets[key] = offsets
        return offsets

    def neighbors_within_radius(self, point: Sequence[float], radius: float) -> Iterator[int]:
        """Yield indices of committed points in the cells that can lie within ``radius``.

        The sequence may include points farther away than ``radius``; it never
        omits a closer one.
        """

        origin = self.cell_of(point)
        cells = self._cells
        for offset in self._offsets_for(radius):
            indices = cells.get(tuple(c + o for c, o in zip(origin, offset)))
            if indices:
                yield from indices

    def clear(self) -> None:
        self._cells.clear()


__all__ = ["Cell", "SpatialGrid", "neighbourhood_offsets"]

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

from .grid import SpatialGrid


class ActiveList:
    """Arena indices of committed points that may still spawn candidates.

    The list never owns point data; every index it holds must already be
    recorded in ``grid``.
    """

    def __init__(self, grid: SpatialGrid):
        self._grid = grid
        self._items: Deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def _check(self, index: int) -> None:
        if not self._grid.contains(index):
            raise IndexError(f"point {index} is not committed to the grid")

    def push(self, index: int) -> None:
        self._check(index)
        self._items.append(index)

    def push_front(self, index: int) -> None:
        self._check(index)
        self._items.appendleft(index)

    def pop(self) -> int:
        """Remove and return the most recently pushed index."""

        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

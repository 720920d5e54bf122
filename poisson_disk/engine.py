"""Grid-accelerated dart throwing with a single global minimum distance."""

from __future__ import annotations

import enum
import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from .active_list import ActiveList
from .config import DEFAULT_TRIES, Point, Shape, validate_parameters
from .grid import SpatialGrid
from .logging_utils import apply_debug_logging
from .sources import UniformSource, default_uniform_source, random_direction, random_point

logger = logging.getLogger(__name__)


class EngineState(str, enum.Enum):
    EMPTY = "empty"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class DartThrowingEngine:
    """Shared state and generation protocol of the sampling engines.

    Committed points live in a dense arena (``self._points``) in commit order.
    The grid and the active list refer to them by arena index only, so a reset
    clears the three containers together. Subclasses decide the separation a
    new point needs (``_required_distance``) and how far a candidate must stay
    from an existing point (``_too_close``).
    """

    def __init__(
        self,
        shape: Sequence[float],
        min_distance: float,
        max_distance: Optional[float] = None,
        tries: int = DEFAULT_TRIES,
        uniform: Optional[UniformSource] = None,
    ):
        if max_distance is None:
            max_distance = min_distance * 2
        self._shape: Shape = validate_parameters(shape, min_distance, max_distance, tries)
        self._min_distance = float(min_distance)
        self._max_distance = float(max_distance)
        self._tries = int(tries)
        self._uniform: UniformSource = uniform if uniform is not None else default_uniform_source()

        self._points: List[Point] = []
        cell_size = self._min_distance / math.sqrt(self.dimension)
        self._grid = SpatialGrid(self.dimension, cell_size, self._points)
        self._active = ActiveList(self._grid)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={list(self._shape)}, min_distance={self._min_distance}, "
            f"max_distance={self._max_distance}, tries={self._tries}, points={len(self._points)})"
        )

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def dimension(self) -> int:
        return len(self._shape)

    @property
    def min_distance(self) -> float:
        return self._min_distance

    @property
    def max_distance(self) -> float:
        return self._max_distance

    @property
    def tries(self) -> int:
        return self._tries

    @property
    def state(self) -> EngineState:
        if not self._points:
            return EngineState.EMPTY
        if len(self._active):
            return EngineState.ACTIVE
        return EngineState.EXHAUSTED

    # -- hooks -----------------------------------------------------------

    def _required_distance(self, point: Point) -> float:
        return self._min_distance

    def _remember(self, point: Point, required: float) -> None:
        """Record per-point data alongside a newly committed arena slot."""

    def _forget(self) -> None:
        """Drop per-point data on reset."""

    def _too_close(self, candidate: Point, required: float) -> bool:
        limit = self._min_distance * self._min_distance
        for index in self._grid.neighbors_within_radius(candidate, self._max_distance):
            if squared_distance(candidate, self._points[index]) < limit:
                return True
        return False

    def _annulus_radius(self, parent: int) -> float:
        low = self._min_distance
        return low + (self._max_distance - low) * self._uniform()

    # -- protocol --------------------------------------------------------

    def _commit(self, point: Point, required: float) -> Point:
        index = len(self._points)
        self._points.append(point)
        self._remember(point, required)
        self._grid.insert(index, point)
        self._active.push(index)
        return point

    def _in_bounds(self, point: Sequence[float]) -> bool:
        return all(0.0 <= value < axis for value, axis in zip(point, self._shape))

    def seed_random_point(self) -> Point:
        """Commit a uniformly random point without any distance check."""

        point = random_point(self._shape, self._uniform)
        return self._commit(point, self._required_distance(point))

    def insert_external_point(self, point: Sequence[float]) -> Optional[Point]:
        """Commit ``point`` if it has the right dimension and lies inside the shape.

        Distances to existing points are not enforced. Returns ``None`` and
        leaves the engine untouched when the point is rejected.
        """

        try:
            if len(point) != self.dimension:
                logger.debug("Rejected external point with %d coordinates (expected %d)", len(point), self.dimension)
                return None
            candidate = tuple(float(value) for value in point)
        except (TypeError, ValueError):
            logger.debug("Rejected external point %r", point)
            return None
        if not self._in_bounds(candidate):
            logger.debug("Rejected external point %s outside shape %s", candidate, self._shape)
            return None
        return self._commit(candidate, self._required_distance(candidate))

    def step(self) -> Optional[Point]:
        """Try to spawn one point around the most recently activated parent.

        Returns the committed point, or ``None`` when either the active list is
        empty or the parent used up its ``tries`` (the parent is then retired
        and the next call moves on to another one).
        """

        if not len(self._active):
            return None

        parent = self._active.pop()
        origin = self._points[parent]
        for _ in range(self._tries):
            radius = self._annulus_radius(parent)
            direction = random_direction(self.dimension, self._uniform)
            candidate = tuple(o + d * radius for o, d in zip(origin, direction))
            if not self._in_bounds(candidate):
                continue
            required = self._required_distance(candidate)
            if self._too_close(candidate, required):
                continue
            self._commit(candidate, required)
            self._active.push_front(parent)
            return candidate

        logger.debug("Retired parent %d after %d tries (%d active left)", parent, self._tries, len(self._active))
        return None

    def drain(self) -> List[Point]:
        """Generate points until no parent can spawn more, seeding first if empty.

        Blocks until the region is full. Returns every committed point in
        commit order, including points that existed before the call.
        """

        if not self._points:
            self.seed_random_point()
        before = len(self._points)
        while len(self._active):
            self.step()
        logger.info(
            "Drained %s: %d new points, %d total", type(self).__name__, len(self._points) - before, len(self._points)
        )
        return self.all_points()

    def all_points(self) -> List[Point]:
        return list(self._points)

    def as_array(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, self.dimension), dtype=float)
        return np.asarray(self._points, dtype=float)

    def reset(self) -> None:
        self._points.clear()
        self._forget()
        self._grid.clear()
        self._active.clear()


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((x - y) * (x - y) for x, y in zip(a, b))


class FixedDensityEngine(DartThrowingEngine):
    """Dart throwing where every pair of points is at least ``min_distance`` apart."""


apply_debug_logging(globals(), logger=logger, skip={"step", "all_points", "as_array", "squared_distance"})

__all__ = ["DartThrowingEngine", "EngineState", "FixedDensityEngine"]

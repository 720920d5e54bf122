"""Dart throwing with a separation that varies across the region."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from .config import DEFAULT_TRIES, ConfigurationError, DensityFunction, Point
from .engine import DartThrowingEngine, squared_distance
from .sources import UniformSource

logger = logging.getLogger(__name__)


class VariableDensityEngine(DartThrowingEngine):
    """Dart throwing driven by a density function.

    Each committed point carries its own required distance
    ``min_distance + density(point) * (max_distance - min_distance)``,
    evaluated once when the point is committed. Two points ``p`` and ``q``
    must be at least ``lo + (hi - lo) * bias`` apart, where ``lo`` and ``hi``
    are the smaller and larger of their required distances: ``bias=0`` lets
    the smaller requirement govern and ``bias=1`` the larger.

    The grid keeps the cell size of the global ``min_distance``; neighbour
    scans cover ``max_distance``, the largest separation any pair can need.
    """

    def __init__(
        self,
        shape: Sequence[float],
        min_distance: float,
        max_distance: Optional[float] = None,
        tries: int = DEFAULT_TRIES,
        density: Optional[DensityFunction] = None,
        bias: float = 0.0,
        uniform: Optional[UniformSource] = None,
    ):
        if not callable(density):
            raise ConfigurationError("density must be a callable mapping a point to [0, 1]")
        bias = float(bias)
        if not math.isfinite(bias):
            raise ConfigurationError(f"bias must be finite, got {bias!r}")
        super().__init__(shape, min_distance, max_distance, tries, uniform)
        self._density = density
        self._bias = max(0.0, min(1.0, bias))
        self._distances: List[float] = []

    @property
    def bias(self) -> float:
        return self._bias

    def required_distance(self, index: int) -> float:
        return self._distances[index]

    def governing_distance(self, a: float, b: float) -> float:
        lo, hi = (a, b) if a <= b else (b, a)
        return lo + (hi - lo) * self._bias

    def _required_distance(self, point: Point) -> float:
        value = float(self._density(point))
        if not 0.0 <= value <= 1.0:
            clamped = max(0.0, min(1.0, value)) if math.isfinite(value) else 0.0
            logger.debug("Density %r at %s clamped to %r", value, point, clamped)
            value = clamped
        return self._min_distance + value * (self._max_distance - self._min_distance)

    def _remember(self, point: Point, required: float) -> None:
        self._distances.append(required)

    def _forget(self) -> None:
        self._distances.clear()

    def _annulus_radius(self, parent: int) -> float:
        low = self._distances[parent]
        return low + (self._max_distance - low) * self._uniform()

    def _too_close(self, candidate: Point, required: float) -> bool:
        for index in self._grid.neighbors_within_radius(candidate, self._max_distance):
            limit = self.governing_distance(required, self._distances[index])
            if squared_distance(candidate, self._points[index]) < limit * limit:
                return True
        return False


__all__ = ["VariableDensityEngine"]

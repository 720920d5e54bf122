"""Uniform random sources and the draws built on top of them."""

from __future__ import annotations

import math
from typing import List, Optional, Protocol, Sequence

import numpy as np

from .config import Point

TWO_PI = 2.0 * math.pi


class UniformSource(Protocol):
    """Callable producing independent floats in ``[0, 1)``."""

    def __call__(self) -> float:
        ...


def default_uniform_source(seed: Optional[int] = None) -> UniformSource:
    """Return a numpy ``Generator.random`` bound method seeded with ``seed``."""

    return np.random.default_rng(seed).random


def _normal(uniform: UniformSource) -> float:
    # Box-Muller; 1 - u keeps the logarithm finite
    u1 = 1.0 - uniform()
    u2 = uniform()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(TWO_PI * u2)


def random_direction(dimension: int, uniform: UniformSource) -> List[float]:
    """Draw a unit vector uniformly on the ``dimension``-sphere."""

    if dimension == 2:
        angle = TWO_PI * uniform()
        return [math.cos(angle), math.sin(angle)]

    while True:
        vector = [_normal(uniform) for _ in range(dimension)]
        norm = math.sqrt(sum(v * v for v in vector))
        if norm > 0.0:
            return [v / norm for v in vector]


def random_point(shape: Sequence[float], uniform: UniformSource) -> Point:
    point = []
    for axis in shape:
        value = uniform() * axis
        # guard the half-open upper bound against rounding
        point.append(value if value < axis else math.nextafter(axis, 0.0))
    return tuple(point)


__all__ = ["UniformSource", "default_uniform_source", "random_direction", "random_point"]

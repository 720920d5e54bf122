"""Checks and summary statistics for generated point sets."""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy.spatial import cKDTree

PairRequirement = Callable[[int, int], float]


def _as_array(points) -> np.ndarray:
    array = np.asarray(points, dtype=float)
    if array.ndim != 2:
        raise ValueError(f"expected an (n, dimension) array of points, got shape {array.shape}")
    return array


def min_pairwise_distance(points) -> float:
    """Smallest distance between two distinct points, ``inf`` for fewer than two."""

    array = _as_array(points)
    if len(array) < 2:
        return math.inf
    distances, _ = cKDTree(array).query(array, k=2)
    return float(distances[:, 1].min())


def nearest_neighbor_stats(points) -> Dict[str, float]:
    array = _as_array(points)
    if len(array) < 2:
        return {"count": float(len(array))}
    distances, _ = cKDTree(array).query(array, k=2)
    nn = distances[:, 1]
    return {
        "count": float(len(array)),
        "mean": float(np.mean(nn)),
        "std": float(np.std(nn)),
        "min": float(np.min(nn)),
        "max": float(np.max(nn)),
    }


def find_violations(
    points, required: Union[float, PairRequirement], *, search_radius: Optional[float] = None, tol: float = 1e-9
) -> List[Tuple[int, int, float]]:
    """Return ``(i, j, distance)`` for pairs closer than their required separation.

    ``required`` is either one distance for every pair or a callable taking two
    point indices. ``search_radius`` bounds the pair search and defaults to the
    scalar requirement; it is mandatory with a callable.
    """

    array = _as_array(points)
    if callable(required):
        if search_radius is None:
            raise ValueError("search_radius is required when the requirement is a callable")
        limit_for = required
    else:
        search_radius = float(required) if search_radius is None else search_radius
        limit_for = lambda i, j: float(required)  # noqa: E731

    violations = []
    for i, j in sorted(cKDTree(array).query_pairs(search_radius)):
        distance = float(np.linalg.norm(array[i] - array[j]))
        if distance < limit_for(i, j) - tol:
            violations.append((i, j, distance))
    return violations


def packing_upper_bound(shape: Sequence[float], min_distance: float) -> float:
    """Upper bound on the number of points ``min_distance`` apart in the box.

    Disks of radius ``min_distance / 2`` around the points do not overlap;
    dividing the box volume by one ball's volume bounds the count from above
    (ignoring boundary effects).
    """

    dimension = len(shape)
    radius = min_distance / 2.0
    ball = math.pi ** (dimension / 2.0) / math.gamma(dimension / 2.0 + 1.0) * radius**dimension
    return float(np.prod(shape)) / ball


__all__ = ["find_violations", "min_pairwise_distance", "nearest_neighbor_stats", "packing_upper_bound"]

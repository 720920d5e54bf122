"""Construction parameters, their defaults and fail-fast validation."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple

Point = Tuple[float, ...]
Shape = Tuple[float, ...]
DensityFunction = Callable[[Point], float]

DEFAULT_TRIES = 30


class ConfigurationError(ValueError):
    """Raised when an engine is constructed with out-of-range parameters."""


def validate_parameters(
    shape: Sequence[float],
    min_distance: float,
    max_distance: float,
    tries: int,
) -> Shape:
    """Check engine parameters and return the shape as a tuple of floats."""

    if len(shape) == 0:
        raise ConfigurationError("shape must have at least one axis")
    axes = tuple(float(axis) for axis in shape)
    for i, axis in enumerate(axes):
        if not math.isfinite(axis) or axis <= 0:
            raise ConfigurationError(f"shape axis {i} must be a positive finite length, got {axis!r}")
    if not math.isfinite(min_distance) or min_distance <= 0:
        raise ConfigurationError(f"min_distance must be positive, got {min_distance!r}")
    if not math.isfinite(max_distance) or max_distance < min_distance:
        raise ConfigurationError(
            f"max_distance must be >= min_distance ({min_distance!r}), got {max_distance!r}"
        )
    if (
        isinstance(tries, bool)
        or not isinstance(tries, numbers.Real)
        or not math.isfinite(tries)
        or int(tries) != tries
        or tries < 1
    ):
        raise ConfigurationError(f"tries must be a positive integer, got {tries!r}")
    return axes


@dataclass
class SamplingOptions:
    """User-facing options, defaulted the way the sampler facade expects.

    ``max_distance`` falls back to twice ``min_distance``; ``tries`` is
    rounded up to an integer of at least 1 and ``bias`` is clamped to
    ``[0, 1]``. Out-of-range distances and shapes are left for the engine
    to reject.
    """

    shape: Sequence[float]
    min_distance: float
    max_distance: Optional[float] = None
    tries: Optional[float] = None
    density: Optional[DensityFunction] = None
    bias: Optional[float] = None

    def resolved(self) -> "SamplingOptions":
        max_distance = self.max_distance or self.min_distance * 2
        tries = self.tries or DEFAULT_TRIES
        # non-finite values are left for the engine to reject
        if isinstance(tries, numbers.Real) and math.isfinite(tries):
            tries = int(math.ceil(max(1, tries)))
        bias = max(0.0, min(1.0, float(self.bias or 0.0)))
        return replace(self, shape=tuple(self.shape), max_distance=max_distance, tries=tries, bias=bias)

    @property
    def uses_density(self) -> bool:
        max_distance = self.max_distance or self.min_distance * 2
        return callable(self.density) and self.min_distance != max_distance


__all__ = [
    "ConfigurationError",
    "DEFAULT_TRIES",
    "DensityFunction",
    "Point",
    "SamplingOptions",
    "Shape",
    "validate_parameters",
]

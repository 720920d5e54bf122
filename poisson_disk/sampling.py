"""Sampler façade choosing the fixed or variable engine once at construction."""

from __future__ import annotations

import logging
from typing import List, Literal, Optional, Sequence, Union

import numpy as np

from .config import SamplingOptions, Point
from .engine import DartThrowingEngine, EngineState, FixedDensityEngine
from .sources import UniformSource
from .variable import VariableDensityEngine

logger = logging.getLogger(__name__)

SamplingMode = Literal["fixed", "variable"]


class PoissonDiskSampling:
    """Blue-noise sampler over an N-dimensional box.

    Accepts either a :class:`SamplingOptions` instance or its fields as
    keyword arguments. A density function selects the variable engine unless
    ``min_distance`` equals the resolved ``max_distance``; the choice is fixed
    for the sampler's lifetime and reported by :attr:`mode`.
    """

    def __init__(
        self,
        options: Optional[SamplingOptions] = None,
        uniform: Optional[UniformSource] = None,
        **kwargs,
    ):
        if options is None:
            options = SamplingOptions(**kwargs)
        elif kwargs:
            raise TypeError("pass either a SamplingOptions instance or keyword options, not both")
        self.options = options.resolved()

        opts = self.options
        self.mode: SamplingMode
        self.implementation: Union[FixedDensityEngine, VariableDensityEngine]
        if opts.uses_density:
            self.mode = "variable"
            self.implementation = VariableDensityEngine(
                opts.shape,
                opts.min_distance,
                opts.max_distance,
                opts.tries,
                density=opts.density,
                bias=opts.bias,
                uniform=uniform,
            )
        else:
            self.mode = "fixed"
            self.implementation = FixedDensityEngine(
                opts.shape, opts.min_distance, opts.max_distance, opts.tries, uniform=uniform
            )
        logger.info(
            "Created %s sampler: shape=%s min_distance=%s max_distance=%s tries=%d",
            self.mode,
            list(opts.shape),
            opts.min_distance,
            opts.max_distance,
            opts.tries,
        )

    @property
    def engine(self) -> DartThrowingEngine:
        return self.implementation

    @property
    def shape(self):
        return self.implementation.shape

    @property
    def state(self) -> EngineState:
        return self.implementation.state

    def __len__(self) -> int:
        return len(self.implementation)

    def seed_random_point(self) -> Point:
        return self.implementation.seed_random_point()

    def insert_external_point(self, point: Sequence[float]) -> Optional[Point]:
        return self.implementation.insert_external_point(point)

    def step(self) -> Optional[Point]:
        return self.implementation.step()

    def drain(self) -> List[Point]:
        """Fill the region; blocks the calling thread until done."""

        return self.implementation.drain()

    def all_points(self) -> List[Point]:
        return self.implementation.all_points()

    def as_array(self) -> np.ndarray:
        return self.implementation.as_array()

    def reset(self) -> None:
        self.implementation.reset()


__all__ = ["PoissonDiskSampling", "SamplingMode"]

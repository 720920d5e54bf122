from .config import ConfigurationError, SamplingOptions, validate_parameters, DEFAULT_TRIES
from .sources import UniformSource, default_uniform_source, random_direction, random_point
from .grid import SpatialGrid
from .active_list import ActiveList
from .engine import DartThrowingEngine, EngineState, FixedDensityEngine
from .variable import VariableDensityEngine
from .sampling import PoissonDiskSampling, SamplingMode
from .diagnostics import find_violations, min_pairwise_distance, nearest_neighbor_stats, packing_upper_bound

__all__ = [
    'ConfigurationError',
    'SamplingOptions',
    'validate_parameters',
    'DEFAULT_TRIES',
    'UniformSource',
    'default_uniform_source',
    'random_direction',
    'random_point',
    'SpatialGrid',
    'ActiveList',
    'DartThrowingEngine',
    'EngineState',
    'FixedDensityEngine',
    'VariableDensityEngine',
    'PoissonDiskSampling',
    'SamplingMode',
    'find_violations',
    'min_pairwise_distance',
    'nearest_neighbor_stats',
    'packing_upper_bound',
]

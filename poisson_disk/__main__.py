import argparse
import logging
import math
from typing import Callable, Optional, Sequence

from poisson_disk import (
    ConfigurationError,
    PoissonDiskSampling,
    SamplingOptions,
    default_uniform_source,
    min_pairwise_distance,
    nearest_neighbor_stats,
    packing_upper_bound,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def corner_density(radius: float) -> Callable[[Sequence[float]], float]:
    """Density that is 0 within ``radius`` of the origin corner and 1 elsewhere."""

    def density(point: Sequence[float]) -> float:
        return 0.0 if math.hypot(*point) < radius else 1.0

    return density


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a Poisson-disk point set and report on it")
    parser.add_argument("--shape", type=float, nargs="+", required=True, help="Axis lengths, e.g. 10 10")
    parser.add_argument("--min-distance", type=float, required=True, help="Minimum distance between points")
    parser.add_argument(
        "--max-distance",
        type=float,
        help="Maximum candidate distance (default: twice the minimum distance)",
    )
    parser.add_argument("--tries", type=int, help="Candidates tried per parent point (default: 30)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the uniform random source")
    parser.add_argument(
        "--density-corner",
        type=float,
        metavar="RADIUS",
        help="Use the variable engine with a dense region of the given radius at the origin",
    )
    parser.add_argument("--bias", type=float, default=0.0, help="Bias for the variable engine (default: 0)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    options = SamplingOptions(
        shape=args.shape,
        min_distance=args.min_distance,
        max_distance=args.max_distance,
        tries=args.tries,
        density=corner_density(args.density_corner) if args.density_corner is not None else None,
        bias=args.bias,
    )
    try:
        sampler = PoissonDiskSampling(options, uniform=default_uniform_source(args.seed))
    except ConfigurationError as exc:
        logger.error("Invalid sampling options: %s", exc)
        return 2

    points = sampler.drain()
    stats = nearest_neighbor_stats(points)
    logger.info("Mode: %s", sampler.mode)
    logger.info("Generated %d points", len(points))
    logger.info("Minimum pairwise distance: %.6g", min_pairwise_distance(points))
    if "mean" in stats:
        logger.info("Nearest-neighbour distance mean=%.6g std=%.6g", stats["mean"], stats["std"])
    logger.info("Packing upper bound: %.1f", packing_upper_bound(sampler.shape, args.min_distance))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

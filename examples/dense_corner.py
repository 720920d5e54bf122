"""Example: variable density, tighter spacing near the origin corner."""

import math

from poisson_disk import PoissonDiskSampling, SamplingOptions, default_uniform_source


def density(point):
    return 0.0 if math.hypot(*point) < 1.5 else 1.0


def main() -> None:
    options = SamplingOptions(shape=[5, 5], min_distance=0.3, max_distance=1.0, density=density, bias=0.0)
    sampler = PoissonDiskSampling(options, uniform=default_uniform_source(1))
    points = sampler.drain()
    corner = sum(1 for p in points if math.hypot(*p) < 1.5)
    print(f"Mode: {sampler.mode}")
    print(f"{corner} of {len(points)} points lie within 1.5 of the origin")


if __name__ == "__main__":
    main()

"""Example: fill a 10x10 square with points at least 1 apart."""

from poisson_disk import PoissonDiskSampling, default_uniform_source, min_pairwise_distance, packing_upper_bound


def main() -> None:
    sampler = PoissonDiskSampling(shape=[10, 10], min_distance=1.0, uniform=default_uniform_source(7))
    points = sampler.drain()
    print(f"Generated {len(points)} points (packing bound {packing_upper_bound([10, 10], 1.0):.0f})")
    print(f"Closest pair: {min_pairwise_distance(points):.4f}")
    print(f"Next step after drain: {sampler.step()}")


if __name__ == "__main__":
    main()

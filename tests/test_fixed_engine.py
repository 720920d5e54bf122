import random

import numpy as np
import pytest

from poisson_disk import EngineState, FixedDensityEngine, find_violations, min_pairwise_distance


def _engine(seed=0, **kwargs):
    source = random.Random(seed)
    params = dict(shape=[10, 10], min_distance=1.0, tries=30)
    params.update(kwargs)
    return FixedDensityEngine(uniform=source.random, **params), source


def test_drain_respects_minimum_distance_and_bounds():
    engine, _ = _engine()
    points = engine.drain()

    assert len(points) > 40
    assert len(points) < 127
    assert min_pairwise_distance(points) >= 1.0 - 1e-9
    assert find_violations(points, 1.0) == []
    for x, y in points:
        assert 0.0 <= x < 10.0
        assert 0.0 <= y < 10.0


def test_exhaustion_is_stable():
    engine, _ = _engine(seed=3)
    points = engine.drain()
    assert engine.state is EngineState.EXHAUSTED
    for _ in range(5):
        assert engine.step() is None
    assert engine.all_points() == points


def test_reset_then_drain_reproduces_sequence():
    engine, source = _engine(seed=42)
    first = engine.drain()
    engine.reset()
    assert engine.state is EngineState.EMPTY
    assert engine.all_points() == []
    source.seed(42)
    assert engine.drain() == first


def test_reset_keeps_configuration():
    engine, _ = _engine(min_distance=0.5, max_distance=0.75, tries=7)
    engine.drain()
    engine.reset()
    assert engine.shape == (10.0, 10.0)
    assert engine.min_distance == 0.5
    assert engine.max_distance == 0.75
    assert engine.tries == 7


def test_seed_random_point_commits_without_distance_check():
    engine, _ = _engine()
    engine.insert_external_point((5.0, 5.0))
    values = iter([0.5, 0.5])
    engine._uniform = lambda: next(values)
    assert engine.seed_random_point() == (5.0, 5.0)
    assert engine.all_points() == [(5.0, 5.0), (5.0, 5.0)]


def test_insert_external_point_validates_dimension_and_bounds():
    engine, _ = _engine()
    assert engine.insert_external_point((0.0, 0.0)) == (0.0, 0.0)
    before = engine.all_points()

    assert engine.insert_external_point((10.0, 1.0)) is None
    assert engine.insert_external_point((-0.1, 1.0)) is None
    assert engine.insert_external_point((1.0, 2.0, 3.0)) is None
    assert engine.insert_external_point((1.0,)) is None
    assert engine.insert_external_point((float("nan"), 1.0)) is None
    assert engine.all_points() == before
    assert len(engine._active) == 1


def test_insert_external_point_ignores_distance():
    engine, _ = _engine()
    engine.insert_external_point((1.0, 1.0))
    assert engine.insert_external_point(np.array([1.1, 1.0])) == (1.1, 1.0)


def test_step_reinserts_parent_at_front_after_success():
    engine, _ = _engine(shape=[100, 100])
    engine.insert_external_point((50.0, 50.0))
    child = engine.step()
    assert child is not None
    assert list(engine._active) == [0, 1]
    assert engine.all_points() == [(50.0, 50.0), child]


def test_step_retires_parent_when_every_try_fails():
    # from the centre of a unit square every annulus point lies outside it
    engine, _ = _engine(shape=[1, 1], min_distance=0.8, tries=5)
    engine.insert_external_point((0.5, 0.5))
    assert engine.state is EngineState.ACTIVE
    assert engine.step() is None
    assert engine.state is EngineState.EXHAUSTED
    assert engine.all_points() == [(0.5, 0.5)]
    assert engine.step() is None


def test_step_on_empty_engine_returns_none():
    engine, _ = _engine()
    assert engine.state is EngineState.EMPTY
    assert engine.step() is None


def test_all_points_keep_commit_order_with_external_points():
    engine, _ = _engine(shape=[20, 20])
    engine.insert_external_point((1.0, 1.0))
    generated = engine.step()
    engine.insert_external_point((19.0, 19.0))
    assert engine.all_points() == [(1.0, 1.0), generated, (19.0, 19.0)]


def test_drain_resumes_after_partial_steps():
    engine, _ = _engine(seed=8)
    engine.seed_random_point()
    for _ in range(10):
        engine.step()
    partial = engine.all_points()
    points = engine.drain()
    assert points[: len(partial)] == partial
    assert find_violations(points, 1.0) == []


def test_three_dimensional_drain():
    engine, _ = _engine(shape=[3, 3, 3], min_distance=0.75)
    points = engine.drain()
    assert all(len(p) == 3 for p in points)
    assert min_pairwise_distance(points) >= 0.75 - 1e-9
    assert engine.as_array().shape == (len(points), 3)


def test_as_array_of_empty_engine():
    engine, _ = _engine(shape=[2, 2, 2, 2])
    assert engine.as_array().shape == (0, 4)
    assert len(engine) == 0


@pytest.mark.parametrize("shape", [[5.0], [4.0, 1.5]])
def test_low_dimensional_and_thin_shapes(shape):
    engine, _ = _engine(shape=shape, min_distance=0.4)
    points = engine.drain()
    assert len(points) >= 1
    assert min_pairwise_distance(points) >= 0.4 - 1e-9
    for point in points:
        assert all(0.0 <= v < axis for v, axis in zip(point, shape))


@pytest.mark.parametrize("point", [None, 3.0, np.float64(1.0), ("a", 1.0)])
def test_insert_external_point_without_coordinates_returns_none(point):
    engine, _ = _engine()
    assert engine.insert_external_point(point) is None
    assert engine.all_points() == []
    assert engine.state is EngineState.EMPTY

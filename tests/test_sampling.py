import numpy as np
import pytest

from voronoi_skeleton import (
    COORD_MAX,
    COORD_MIN,
    Log2Sampler,
    Point,
    Rect,
    RectSampler,
    SamplingError,
    make_sampler,
    sample_points,
)


@pytest.mark.parametrize("count", [0, 1, 7, 25])
def test_sample_points_returns_requested_count(count):
    rng = np.random.default_rng(0)
    assert len(sample_points(count, rng)) == count


def test_sample_points_rejects_negative_count():
    with pytest.raises(ValueError):
        sample_points(-1, np.random.default_rng(0))


def test_sample_points_is_deterministic_for_a_seed():
    first = sample_points(12, np.random.default_rng(42))
    second = sample_points(12, np.random.default_rng(42))
    assert first == second


def test_log2_sampler_coordinates_stay_in_log_range():
    points = sample_points(200, np.random.default_rng(5), Log2Sampler())
    assert all(0 <= p.x <= 14 and 0 <= p.y <= 14 for p in points)


def test_log2_sampler_draws_from_full_coordinate_range(scripted_rng):
    rng = scripted_rng([1, 1])
    Log2Sampler().sample(rng)
    assert rng.calls == [(COORD_MIN, COORD_MAX, True)] * 2


def test_log2_sampler_redraws_non_positive_values(scripted_rng):
    rng = scripted_rng([-3, 0, 8, 300])
    assert Log2Sampler().sample(rng) == Point(3, 8)
    assert rng.values == []


def test_log2_sampler_gives_up_after_max_redraws(scripted_rng):
    rng = scripted_rng([0, -1, -7])
    with pytest.raises(SamplingError):
        Log2Sampler(max_redraws=3).sample(rng)


def test_rect_sampler_stays_inside_bounds():
    bounds = Rect.from_coords(10, 10, -10, -10)
    points = sample_points(300, np.random.default_rng(9), RectSampler(bounds))
    assert all(bounds.contains(p) for p in points)
    assert len({p.x for p in points}) > 1


def test_rect_sampler_degenerate_axis(scripted_rng):
    bounds = Rect.from_coords(5, -2, 5, 2)
    rng = scripted_rng([5, -2])
    assert RectSampler(bounds).sample(rng) == Point(5, -2)
    assert rng.calls == [(5, 5, True), (-2, 2, True)]


def test_make_sampler_modes():
    bounds = Rect.from_coords(0, 0, 1, 1)
    assert isinstance(make_sampler("log2", bounds, max_redraws=5), Log2Sampler)
    assert make_sampler("log2", bounds, max_redraws=5).max_redraws == 5
    assert make_sampler("rect", bounds).bounds == bounds
    with pytest.raises(ValueError):
        make_sampler("gaussian", bounds)

"""Unit tests for jitter placement."""

import numpy as np
import pytest

from jitterplot.errors import InvalidConfigError
from jitterplot.pipeline.categories import resolve_categories
from jitterplot.pipeline.jitter import (
    category_rng,
    compute_render_specs,
    density_scale,
    draw_points,
    jitter_offsets,
)
from jitterplot.pipeline.model import Sample
from jitterplot.pipeline.surface import RecordingSurface


def make_samples(groups, values):
    return [Sample(value=float(v), group=g, index=i) for i, (g, v) in enumerate(zip(groups, values))]


@pytest.mark.parametrize("method", ["density", "uniform"])
@pytest.mark.parametrize("width", [0.0, 0.1, 0.5, 2.0])
def test_offsets_within_half_width(method, width):
    rng = np.random.default_rng(123)
    values = rng.normal(size=200)
    offsets = jitter_offsets(values, width, method=method, rng=np.random.default_rng(7))
    assert offsets.shape == values.shape
    assert np.all(np.abs(offsets) <= width / 2)


def test_zero_width_gives_zero_offsets():
    assert np.all(jitter_offsets([1.0, 2.0, 3.0], 0.0) == 0.0)


def test_negative_width_raises():
    with pytest.raises(InvalidConfigError):
        jitter_offsets([1.0], -0.1)


def test_unknown_method_raises():
    with pytest.raises(InvalidConfigError):
        jitter_offsets([1.0], 0.5, method="beeswarm")


def test_density_scale_bounds():
    values = np.concatenate([np.zeros(20), np.linspace(5, 10, 5)])
    scale = density_scale(values)
    assert np.all(scale > 0)
    assert np.all(scale <= 1.0)
    assert scale.max() == pytest.approx(1.0)
    # crowded value spreads wider than an isolated one
    assert scale[0] > scale[-1]


def test_density_scale_degenerate_inputs():
    assert np.all(density_scale(np.array([3.0])) == 1.0)
    assert np.all(density_scale(np.array([2.0, 2.0, 2.0])) == 1.0)
    scale = density_scale(np.array([1.0, np.nan, 2.0]))
    assert scale[1] == 1.0


def test_category_rng_is_reproducible_per_label():
    a = category_rng("A", 0).uniform(size=5)
    b = category_rng("A", 0).uniform(size=5)
    c = category_rng("B", 0).uniform(size=5)
    np.testing.assert_array_equal(a, b)
    assert not np.array_equal(a, c)


def test_render_specs_positions_and_colors():
    samples = make_samples(["A", "A", "B", "B"], [1, 2, 3, 4])
    res = resolve_categories(samples)
    colors = [(0.0, 0.0, 1.0)] * 4
    specs = compute_render_specs(res.samples, res.categories, colors, 0.5, method="uniform", seed=0)
    assert len(specs) == 4
    for spec, sample in zip(specs, res.samples):
        ordinal = res.ordinals[sample.group]
        assert spec.y_value == sample.value
        assert abs(spec.x_position - ordinal) <= 0.25 + 1e-12
        assert spec.x_position == pytest.approx(ordinal + spec.offset)
        assert spec.color == (0.0, 0.0, 1.0)


def test_render_specs_deterministic_with_seed():
    samples = make_samples(["A", "B", "A", "B", "A"], [1, 2, 3, 4, 5])
    res = resolve_categories(samples)
    colors = [(0.0, 0.0, 1.0)] * 5
    a = compute_render_specs(res.samples, res.categories, colors, 0.5, seed=3)
    b = compute_render_specs(res.samples, res.categories, colors, 0.5, seed=3)
    assert a == b


def test_category_offsets_do_not_depend_on_other_categories():
    only_a = resolve_categories(make_samples(["A", "A", "A"], [1, 2, 3]))
    with_b = resolve_categories(make_samples(["A", "A", "A", "B"], [1, 2, 3, 9]))
    colors3 = [(0.0, 0.0, 1.0)] * 3
    colors4 = [(0.0, 0.0, 1.0)] * 4
    s1 = compute_render_specs(only_a.samples, only_a.categories, colors3, 0.5, seed=1)
    s2 = compute_render_specs(with_b.samples, with_b.categories, colors4, 0.5, seed=1)
    assert [s.offset for s in s1] == [s.offset for s in s2[:3]]


def test_draw_points_one_call_per_sample():
    samples = make_samples(["A", "B", "A"], [1, 2, 3])
    res = resolve_categories(samples)
    specs = compute_render_specs(res.samples, res.categories, [(1.0, 0.0, 0.0)] * 3, 0.5)
    surface = RecordingSurface()
    draw_points(surface, res.samples, specs, 6)
    assert surface.calls.count("draw_point") == 3
    assert [p["y"] for p in surface.points] == [1.0, 2.0, 3.0]
    assert [p["label"] for p in surface.points] == ["A", "B", "A"]
    assert all(p["size"] == 6 for p in surface.points)

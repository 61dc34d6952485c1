"""Unit tests for median markers and legend entries."""

import numpy as np
import pytest

from jitterplot.pipeline.categories import resolve_categories
from jitterplot.pipeline.colors import map_colors
from jitterplot.pipeline.legend import build_legend, draw_legend
from jitterplot.pipeline.median import category_medians, draw_medians
from jitterplot.pipeline.model import Sample
from jitterplot.pipeline.surface import RecordingSurface


def make_samples(groups, values, colorgroup=None):
    cg = colorgroup if colorgroup is not None else [None] * len(groups)
    return [
        Sample(value=float(v), group=g, colorgroup=c, index=i)
        for i, (g, v, c) in enumerate(zip(groups, values, cg))
    ]


def test_medians_example():
    """values=[1,2,3,4], groups=[A,A,B,B] -> A=1.5, B=3.5."""
    res = resolve_categories(make_samples(["A", "A", "B", "B"], [1, 2, 3, 4]))
    markers = category_medians(res.samples, res.categories)
    assert [(m.label, m.median) for m in markers] == [("A", 1.5), ("B", 3.5)]
    assert markers[0].x_start == pytest.approx(-0.3)
    assert markers[0].x_end == pytest.approx(0.3)
    assert markers[1].x_start == pytest.approx(0.7)
    assert markers[1].x_end == pytest.approx(1.3)


def test_medians_ignore_colorgroup():
    groups = ["A", "A", "A", "B", "B"]
    values = [5, 1, 3, 10, 20]
    plain = resolve_categories(make_samples(groups, values))
    colored = resolve_categories(make_samples(groups, values, ["x", "y", "x", "y", "x"]))
    m1 = category_medians(plain.samples, plain.categories)
    m2 = category_medians(colored.samples, colored.categories)
    assert [m.median for m in m1] == [m.median for m in m2] == [3.0, 15.0]
    rng = np.random.default_rng(0)
    vals = rng.normal(size=30)
    grp = ["A" if i % 3 else "B" for i in range(30)]
    res = resolve_categories(make_samples(grp, vals))
    for m in category_medians(res.samples, res.categories):
        expected = np.median([v for v, g in zip(vals, grp) if g == m.label])
        assert m.median == pytest.approx(expected)


def test_medians_follow_display_order():
    res = resolve_categories(make_samples(["A", "B", "A"], [1, 7, 3]), ["B", "A"])
    markers = category_medians(res.samples, res.categories, half_width=0.1)
    assert [(m.label, m.ordinal, m.median) for m in markers] == [("B", 0, 7.0), ("A", 1, 2.0)]
    assert markers[1].x_start == pytest.approx(0.9)


def test_draw_medians_one_segment_per_category():
    res = resolve_categories(make_samples(["A", "B"], [1, 2]))
    surface = RecordingSurface()
    draw_medians(surface, category_medians(res.samples, res.categories), line_width=3)
    assert len(surface.segments) == 2
    assert surface.segments[0]["color"] == (0.0, 0.0, 0.0)
    assert surface.segments[0]["width"] == 3


def test_legend_requires_table_and_flag():
    samples = make_samples(["A", "B", "A"], [1, 2, 3], ["x", "y", "z"])
    table = np.array([[1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=float)
    with_table = map_colors(samples, table)
    without_table = map_colors(samples)
    assert build_legend(False, with_table) == []
    assert build_legend(True, without_table) == []
    entries = build_legend(True, with_table)
    assert [e.label for e in entries] == ["x", "y", "z"]
    assert entries[1].color == (0.0, 1.0, 0.0)


def test_draw_legend():
    samples = make_samples(["A", "B"], [1, 2])
    entries = build_legend(True, map_colors(samples, np.array([[1, 0, 0], [0, 1, 0]], dtype=float)))
    surface = RecordingSurface()
    draw_legend(surface, entries)
    assert surface.legend_entries == [("A", (1.0, 0.0, 0.0)), ("B", (0.0, 1.0, 0.0))]
    assert surface.legend_visible

    off = RecordingSurface()
    draw_legend(off, [])
    assert off.legend_entries == []
    assert not off.legend_visible

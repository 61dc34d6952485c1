"""Unit tests for colour mapping."""

import numpy as np
import pytest

from jitterplot.errors import ColorIndexError
from jitterplot.pipeline.colors import DEFAULT_POINT_COLOR, map_colors, to_plotly_color
from jitterplot.pipeline.model import Sample


def make_samples(groups, colorgroup=None):
    cg = colorgroup if colorgroup is not None else [None] * len(groups)
    return [Sample(value=float(i), group=g, colorgroup=c, index=i) for i, (g, c) in enumerate(zip(groups, cg))]


def test_colorgroup_selects_colors():
    """colors=[[1,0,0],[0,1,0]], colorgroup=[X,Y,X,Y] -> samples 1,3 red; 2,4 green."""
    samples = make_samples(["A", "A", "B", "B"], ["X", "Y", "X", "Y"])
    mapping = map_colors(samples, np.array([[1, 0, 0], [0, 1, 0]], dtype=float))
    assert mapping.colors == ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert mapping.ordinals == {"X": 0, "Y": 1}
    assert mapping.has_table


def test_group_used_when_no_colorgroup():
    samples = make_samples(["B", "A", "B"])
    mapping = map_colors(samples, np.array([[1, 0, 0], [0, 0, 1]], dtype=float))
    assert mapping.labels == ["B", "A"]
    assert mapping.colors[1] == (0.0, 0.0, 1.0)


def test_color_ordinals_independent_of_category_order():
    # colorgroup first occurrence is Y then X, even though group order is A then B
    samples = make_samples(["A", "A", "B"], ["Y", "X", "Y"])
    mapping = map_colors(samples, np.array([[1, 0, 0], [0, 1, 0]], dtype=float))
    assert mapping.ordinals == {"Y": 0, "X": 1}


def test_no_table_uses_default_color():
    mapping = map_colors(make_samples(["A", "B"]))
    assert mapping.colors == (DEFAULT_POINT_COLOR, DEFAULT_POINT_COLOR)
    assert not mapping.has_table
    assert mapping.labels == ["A", "B"]


def test_ordinal_beyond_table_raises():
    with pytest.raises(ColorIndexError):
        map_colors(make_samples(["A", "B"]), np.array([[1, 0, 0]], dtype=float))


def test_to_plotly_color():
    assert to_plotly_color((1.0, 0.0, 0.5)) == "rgb(255, 0, 128)"

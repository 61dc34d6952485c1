"""Unit tests for JitterPlotOptions validation and serialization."""

import pytest

from jitterplot.errors import InvalidConfigError
from jitterplot.pipeline.plot_options import JitterPlotOptions


def test_defaults():
    opts = JitterPlotOptions()
    assert opts.colors is None
    assert opts.title == ""
    assert opts.x_label == ""
    assert opts.y_label == ""
    assert opts.jitter_width == 0.5
    assert opts.colorgroup is None
    assert opts.show_median is True
    assert opts.show_legend is False
    assert opts.display_order is None
    assert opts.median_half_width == 0.3
    opts.validate()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"jitter_width": -0.1},
        {"jitter_width": float("inf")},
        {"jitter_method": "swarm"},
        {"seed": -1},
        {"seed": 1.5},
        {"point_size": 0},
        {"median_half_width": -0.3},
        {"median_line_width": 0},
        {"median_color": (2, 0, 0)},
        {"default_color": "blue"},
        {"title": 3},
    ],
)
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(InvalidConfigError):
        JitterPlotOptions(**kwargs).validate()


def test_seed_none_is_valid():
    JitterPlotOptions(seed=None).validate()


def test_to_dict_from_dict_round_trip():
    opts = JitterPlotOptions(
        colors=[(1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
        title="t",
        jitter_width=0.25,
        show_legend=True,
        display_order=["B", "A"],
        seed=None,
    )
    restored = JitterPlotOptions.from_dict(opts.to_dict())
    assert restored == opts


def test_from_dict_ignores_unknown_keys():
    restored = JitterPlotOptions.from_dict({"jitter_width": 0.1, "PlotTitle": "x"})
    assert restored.jitter_width == 0.1
    assert restored.title == ""

"""Jitter plot pipeline: validation, category ordering, colouring, jitter, medians, legend."""

from jitterplot.pipeline.categories import coerce_labels, resolve_categories, stable_unique
from jitterplot.pipeline.options_store import JitterPlotConfig
from jitterplot.pipeline.plot_options import JitterPlotOptions
from jitterplot.pipeline.plotting import (
    JitterLayout,
    build_layout,
    jitterplot,
    jitterplot_from_dataframe,
    render_layout,
)
from jitterplot.pipeline.stats import category_stats_table, jitter_report
from jitterplot.pipeline.surface import PlotlySurface, RecordingSurface, RenderSurface

__all__ = [
    "JitterLayout",
    "JitterPlotConfig",
    "JitterPlotOptions",
    "PlotlySurface",
    "RecordingSurface",
    "RenderSurface",
    "build_layout",
    "category_stats_table",
    "coerce_labels",
    "jitter_report",
    "jitterplot",
    "jitterplot_from_dataframe",
    "render_layout",
    "resolve_categories",
    "stable_unique",
]

"""
jitterplot: scatter-based alternative to box plots for categorized numeric data.

This package provides:
- jitterplot(): jittered points per category, optional colour groups,
  per-category median markers and a legend, drawn on a Plotly figure
- build_layout(): the same pipeline without drawing, for inspection or
  custom rendering surfaces
- JSON option presets (JitterPlotConfig) and a per-category stats report
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from jitterplot.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging follows the parent application's configuration.
"""

import logging

from jitterplot.errors import (
    CategoryOrderError,
    ColorIndexError,
    ColorTableSizeError,
    InvalidConfigError,
    JitterPlotError,
    ShapeMismatchError,
    ValueTypeError,
)
from jitterplot.pipeline import (
    JitterLayout,
    JitterPlotConfig,
    JitterPlotOptions,
    PlotlySurface,
    RecordingSurface,
    RenderSurface,
    build_layout,
    category_stats_table,
    coerce_labels,
    jitter_report,
    jitterplot,
    jitterplot_from_dataframe,
    render_layout,
)
from jitterplot.utils.logging import configure_logging, get_logger

# NullHandler so records don't reach the root logger unless an application
# (or configure_logging()) sets up output.
_logger = logging.getLogger("jitterplot")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "CategoryOrderError",
    "ColorIndexError",
    "ColorTableSizeError",
    "InvalidConfigError",
    "JitterLayout",
    "JitterPlotConfig",
    "JitterPlotError",
    "JitterPlotOptions",
    "PlotlySurface",
    "RecordingSurface",
    "RenderSurface",
    "ShapeMismatchError",
    "ValueTypeError",
    "build_layout",
    "category_stats_table",
    "coerce_labels",
    "configure_logging",
    "get_logger",
    "jitter_report",
    "jitterplot",
    "jitterplot_from_dataframe",
    "render_layout",
]

__version__ = "0.1.0"

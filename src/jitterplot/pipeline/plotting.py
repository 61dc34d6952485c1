"""Jitter plot entry points.

``build_layout`` runs the pure part of the pipeline (validation, category
resolution, colouring, jitter placement, medians, legend) and returns an
immutable JitterLayout. ``render_layout`` issues the draw calls. ``jitterplot``
does both. Because the layout is complete before the first draw call, any
input error leaves the surface untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from jitterplot.errors import InvalidConfigError, ValueTypeError
from jitterplot.pipeline.categories import coerce_labels, resolve_categories
from jitterplot.pipeline.colors import ColorMapping, map_colors
from jitterplot.pipeline.jitter import compute_render_specs, draw_points
from jitterplot.pipeline.legend import build_legend, draw_legend
from jitterplot.pipeline.median import category_medians, draw_medians
from jitterplot.pipeline.model import Category, LegendEntry, MedianMarker, RenderSpec, Sample
from jitterplot.pipeline.options_store import JitterPlotConfig
from jitterplot.pipeline.plot_options import JitterPlotOptions
from jitterplot.pipeline.surface import PlotlySurface, RenderSurface
from jitterplot.pipeline.validation import validate_inputs
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

_OPTION_NAMES = frozenset(f.name for f in fields(JitterPlotOptions))


@dataclass(frozen=True)
class JitterLayout:
    """Everything needed to draw one jitter plot.

    Attributes:
        options: Options the layout was built with.
        samples: Samples in display order.
        categories: Group categories in display order.
        color_mapping: Colour-category enumeration and per-sample colours.
        specs: One RenderSpec per sample, aligned with ``samples``.
        medians: Median markers (empty when show_median is off).
        legend: Legend entries (empty unless a colour table and show_legend are set).
    """
    options: JitterPlotOptions
    samples: tuple[Sample, ...]
    categories: tuple[Category, ...]
    color_mapping: ColorMapping
    specs: tuple[RenderSpec, ...]
    medians: tuple[MedianMarker, ...]
    legend: tuple[LegendEntry, ...]

    @property
    def category_labels(self) -> list[str]:
        return [c.label for c in self.categories]

    @property
    def group_ordinals(self) -> dict[str, int]:
        return {c.label: c.ordinal for c in self.categories}

    @property
    def offsets(self) -> np.ndarray:
        return np.array([s.offset for s in self.specs], dtype=float)

    @property
    def padding(self) -> float:
        """Half-extent of the widest primitive around a category centre."""
        opts = self.options
        half_extent = max(opts.jitter_width / 2.0, opts.median_half_width if opts.show_median else 0.0)
        return max(0.5, half_extent + 0.1)


def _merge_options(
    options: Optional[JitterPlotOptions],
    overrides: dict[str, Any],
    preset: Optional[str] = None,
    config: Optional[JitterPlotConfig] = None,
) -> JitterPlotOptions:
    unknown = sorted(set(overrides) - _OPTION_NAMES)
    if unknown:
        raise InvalidConfigError(f"unknown jitter plot options: {unknown}")
    if preset is not None or config is not None:
        if options is not None:
            raise InvalidConfigError("pass either options or a preset, not both")
        if config is None:
            config = JitterPlotConfig.load()
        base = config.get_options(preset)
        logger.debug(f"using preset '{preset or config.data.default_preset}' from {config.path}")
    else:
        base = options if options is not None else JitterPlotOptions()
    return replace(base, **overrides) if overrides else base


def build_layout(
    values: Sequence[float],
    groups: Sequence[str],
    options: Optional[JitterPlotOptions] = None,
    *,
    preset: Optional[str] = None,
    config: Optional[JitterPlotConfig] = None,
    **overrides: Any,
) -> JitterLayout:
    """Validate inputs and compute the full plot layout without drawing anything.

    Args:
        values: Numeric value per sample.
        groups: Category label (string) per sample.
        options: Plot options; keyword overrides are applied on top.
        preset: Name of a stored option preset to start from instead of
            ``options``. The default preset is used when only ``config`` is given.
        config: Preset store to read from. Loaded from the per-user config
            file when a preset is requested without one.
        **overrides: Any JitterPlotOptions field, e.g. ``jitter_width=0.3``.

    Raises:
        ShapeMismatchError, ValueTypeError, CategoryOrderError, ColorIndexError,
        InvalidConfigError: See jitterplot.errors.
    """
    opts = _merge_options(options, overrides, preset, config)
    opts.validate()

    inputs = validate_inputs(values, groups, colorgroup=opts.colorgroup, colors=opts.colors)
    resolution = resolve_categories(inputs.samples, opts.display_order)
    mapping = map_colors(resolution.samples, inputs.colors, default_color=tuple(opts.default_color))
    specs = compute_render_specs(
        resolution.samples,
        resolution.categories,
        mapping.colors,
        opts.jitter_width,
        method=opts.jitter_method,
        seed=opts.seed,
    )
    medians = (
        category_medians(resolution.samples, resolution.categories, half_width=opts.median_half_width)
        if opts.show_median else []
    )
    legend = build_legend(opts.show_legend, mapping)

    return JitterLayout(
        options=opts,
        samples=resolution.samples,
        categories=resolution.categories,
        color_mapping=mapping,
        specs=specs,
        medians=tuple(medians),
        legend=tuple(legend),
    )


def render_layout(layout: JitterLayout, surface: RenderSurface) -> RenderSurface:
    """Draw a computed layout onto a surface and return the surface."""
    opts = layout.options
    surface.set_categories(layout.category_labels, padding=layout.padding)
    draw_points(surface, layout.samples, layout.specs, opts.point_size)
    surface.set_title(opts.title)
    surface.set_axis_labels(opts.x_label, opts.y_label)
    draw_legend(surface, layout.legend)
    draw_medians(surface, layout.medians, color=tuple(opts.median_color), line_width=opts.median_line_width)
    surface.finish()
    return surface


def jitterplot(
    values: Sequence[float],
    groups: Sequence[str],
    *,
    options: Optional[JitterPlotOptions] = None,
    surface: Optional[RenderSurface] = None,
    preset: Optional[str] = None,
    config: Optional[JitterPlotConfig] = None,
    **overrides: Any,
) -> RenderSurface:
    """Render a jitter plot of ``values`` grouped by ``groups``.

    Args:
        values: Numeric value per sample.
        groups: Category label (string) per sample. Convert numeric labels with
            coerce_labels() first.
        options: Plot options (see JitterPlotOptions for defaults).
        surface: Surface to draw on. A new PlotlySurface is created when None.
        preset: Stored option preset to start from (see build_layout).
        config: Preset store holding ``preset``.
        **overrides: Any JitterPlotOptions field, e.g. ``colors=[[1, 0, 0]]``.

    Returns:
        The surface that was drawn on (for PlotlySurface, ``.figure`` is the plotly figure).
    """
    layout = build_layout(values, groups, options, preset=preset, config=config, **overrides)
    logger.info(
        f"jitterplot: samples={len(layout.samples)}, categories={layout.category_labels}, "
        f"color_categories={len(layout.color_mapping.ordinals)}, "
        f"medians={len(layout.medians)}, legend_entries={len(layout.legend)}"
    )
    if surface is None:
        surface = PlotlySurface()
    return render_layout(layout, surface)


def _numeric_column(df: pd.DataFrame, col: str) -> np.ndarray:
    s = df[col]
    if getattr(s.dtype, "kind", None) in {"i", "u", "f"}:
        return s.to_numpy(dtype=float)
    try:
        return pd.to_numeric(s, errors="raise").to_numpy(dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueTypeError(f"column {col!r} is not numeric: {e}") from e


def jitterplot_from_dataframe(
    df: pd.DataFrame,
    value_col: str,
    group_col: str,
    *,
    colorgroup_col: Optional[str] = None,
    options: Optional[JitterPlotOptions] = None,
    surface: Optional[RenderSurface] = None,
    preset: Optional[str] = None,
    config: Optional[JitterPlotConfig] = None,
    **overrides: Any,
) -> RenderSurface:
    """Render a jitter plot from dataframe columns.

    Label columns go through coerce_labels(), so numeric group columns (e.g.
    batch numbers) work directly. Axis labels default to the column names
    unless options or a preset are given.

    Raises:
        ValueError: If a named column is missing.
        InvalidConfigError: If colorgroup is passed both as a column and an option.
    """
    for col in (value_col, group_col, colorgroup_col):
        if col is not None and col not in df.columns:
            raise ValueError(f"df must contain column {col!r}")
    if colorgroup_col is not None and "colorgroup" in overrides:
        raise InvalidConfigError("pass colorgroup either as colorgroup_col or as an option, not both")

    values = _numeric_column(df, value_col)
    groups = coerce_labels(df[group_col].tolist())
    if colorgroup_col is not None:
        overrides["colorgroup"] = coerce_labels(df[colorgroup_col].tolist())
    base = options
    if base is None and preset is None and config is None:
        base = JitterPlotOptions(x_label=group_col, y_label=value_col)
    logger.debug(f"jitterplot_from_dataframe: rows={len(df)}, value_col={value_col}, group_col={group_col}")
    return jitterplot(values, groups, options=base, surface=surface, preset=preset, config=config, **overrides)

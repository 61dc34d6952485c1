"""Jitter plot options.

This module defines the JitterPlotOptions dataclass: every optional setting of
a jitter plot with its default, plus JSON-friendly (de)serialization.

Defaults
--------
=================  =============  ==============================================
field              default        meaning
=================  =============  ==============================================
colors             None           colour table, one RGB row per colour category
title              ""             plot title
x_label            ""             x-axis label
y_label            ""             y-axis label
jitter_width       0.5            maximum jitter width (offsets within +-w/2)
colorgroup         None           secondary label per sample, controls colour
show_median        True           draw per-category median markers
show_legend        False          draw legend (only with a colour table)
display_order      None           explicit category order
jitter_method      "density"      "density" or "uniform"
seed               0              jitter seed; None = non-reproducible
point_size         6              marker size
median_half_width  0.3            half-width of median markers (ordinal units)
median_line_width  2              median marker line width
median_color       (0, 0, 0)      median marker colour
default_color      (0, 0, 1)      point colour when no colour table is given
=================  =============  ==============================================
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Optional, Sequence

from jitterplot.errors import InvalidConfigError
from jitterplot.pipeline.colors import DEFAULT_POINT_COLOR
from jitterplot.pipeline.jitter import DEFAULT_JITTER_WIDTH, JITTER_METHODS
from jitterplot.pipeline.median import (
    DEFAULT_MEDIAN_COLOR,
    DEFAULT_MEDIAN_HALF_WIDTH,
    DEFAULT_MEDIAN_LINE_WIDTH,
)
from jitterplot.pipeline.model import RGB
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)


def _is_real(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def _check_rgb(name: str, rgb: Any) -> None:
    try:
        channels = [float(c) for c in rgb]
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(f"{name} must be an RGB triplet, got {rgb!r}") from e
    if len(channels) != 3 or any(not (0.0 <= c <= 1.0) for c in channels):
        raise InvalidConfigError(f"{name} must be an RGB triplet with channels in [0, 1], got {rgb!r}")


@dataclass
class JitterPlotOptions:
    """All optional settings for one jitter plot (see module docstring for defaults)."""
    colors: Optional[Sequence[Sequence[float]]] = None
    title: str = ""
    x_label: str = ""
    y_label: str = ""
    jitter_width: float = DEFAULT_JITTER_WIDTH
    colorgroup: Optional[Sequence[str]] = None
    show_median: bool = True
    show_legend: bool = False
    display_order: Optional[Sequence[str]] = None
    jitter_method: str = "density"
    seed: Optional[int] = 0
    point_size: float = 6
    median_half_width: float = DEFAULT_MEDIAN_HALF_WIDTH
    median_line_width: float = DEFAULT_MEDIAN_LINE_WIDTH
    median_color: RGB = DEFAULT_MEDIAN_COLOR
    default_color: RGB = DEFAULT_POINT_COLOR

    def validate(self) -> None:
        """Check option ranges.

        Colour table and label vectors are checked against the data by the
        input validator, not here.

        Raises:
            InvalidConfigError: On the first out-of-range option.
        """
        for name in ("title", "x_label", "y_label"):
            if not isinstance(getattr(self, name), str):
                raise InvalidConfigError(f"{name} must be a string, got {getattr(self, name)!r}")
        if not _is_real(self.jitter_width) or not math.isfinite(self.jitter_width) or self.jitter_width < 0:
            raise InvalidConfigError(f"jitter_width must be a finite number >= 0, got {self.jitter_width!r}")
        if self.jitter_method not in JITTER_METHODS:
            raise InvalidConfigError(
                f"jitter_method must be one of {JITTER_METHODS}, got {self.jitter_method!r}"
            )
        if self.seed is not None and (not isinstance(self.seed, numbers.Integral)
                                      or isinstance(self.seed, bool) or self.seed < 0):
            raise InvalidConfigError(f"seed must be None or an integer >= 0, got {self.seed!r}")
        if not _is_real(self.point_size) or not self.point_size > 0:
            raise InvalidConfigError(f"point_size must be > 0, got {self.point_size!r}")
        if (not _is_real(self.median_half_width) or not math.isfinite(self.median_half_width)
                or self.median_half_width < 0):
            raise InvalidConfigError(f"median_half_width must be >= 0, got {self.median_half_width!r}")
        if not _is_real(self.median_line_width) or not self.median_line_width > 0:
            raise InvalidConfigError(f"median_line_width must be > 0, got {self.median_line_width!r}")
        _check_rgb("median_color", self.median_color)
        _check_rgb("default_color", self.default_color)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "colors": [list(map(float, row)) for row in self.colors] if self.colors is not None else None,
            "title": self.title,
            "x_label": self.x_label,
            "y_label": self.y_label,
            "jitter_width": self.jitter_width,
            "colorgroup": list(self.colorgroup) if self.colorgroup is not None else None,
            "show_median": self.show_median,
            "show_legend": self.show_legend,
            "display_order": list(self.display_order) if self.display_order is not None else None,
            "jitter_method": self.jitter_method,
            "seed": self.seed,
            "point_size": self.point_size,
            "median_half_width": self.median_half_width,
            "median_line_width": self.median_line_width,
            "median_color": list(self.median_color),
            "default_color": list(self.default_color),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JitterPlotOptions":
        """Deserialize from a dictionary.

        Missing keys take their defaults; unknown keys are ignored with a warning.
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Unknown key '{key}' in jitter plot options, ignoring")

        colors = data.get("colors")
        colorgroup = data.get("colorgroup")
        display_order = data.get("display_order")
        seed = data.get("seed", 0)
        return cls(
            colors=[tuple(float(c) for c in row) for row in colors] if colors else None,
            title=str(data.get("title", "")),
            x_label=str(data.get("x_label", "")),
            y_label=str(data.get("y_label", "")),
            jitter_width=float(data.get("jitter_width", DEFAULT_JITTER_WIDTH)),
            colorgroup=[str(c) for c in colorgroup] if colorgroup is not None else None,
            show_median=bool(data.get("show_median", True)),
            show_legend=bool(data.get("show_legend", False)),
            display_order=[str(c) for c in display_order] if display_order is not None else None,
            jitter_method=str(data.get("jitter_method", "density")),
            seed=int(seed) if seed is not None else None,
            point_size=float(data.get("point_size", 6)),
            median_half_width=float(data.get("median_half_width", DEFAULT_MEDIAN_HALF_WIDTH)),
            median_line_width=float(data.get("median_line_width", DEFAULT_MEDIAN_LINE_WIDTH)),
            median_color=tuple(float(c) for c in data.get("median_color", DEFAULT_MEDIAN_COLOR)),
            default_color=tuple(float(c) for c in data.get("default_color", DEFAULT_POINT_COLOR)),
        )

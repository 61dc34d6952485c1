"""Per-category median markers.

Medians are always computed per primary group category, never per
colorgroup, so the overlay is unaffected by how points are coloured.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from jitterplot.pipeline.model import RGB, Category, MedianMarker, Sample
from jitterplot.pipeline.surface import RenderSurface
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MEDIAN_HALF_WIDTH = 0.3
DEFAULT_MEDIAN_LINE_WIDTH = 2
DEFAULT_MEDIAN_COLOR: RGB = (0.0, 0.0, 0.0)


def category_medians(
    samples: Sequence[Sample],
    categories: Sequence[Category],
    *,
    half_width: float = DEFAULT_MEDIAN_HALF_WIDTH,
) -> list[MedianMarker]:
    """One median marker per group category, in display order.

    Uses the standard median (mean of the two middle values for even counts).
    A NaN value in a category makes its median NaN.
    """
    markers: list[MedianMarker] = []
    for cat in categories:
        vals = np.array([samples[p].value for p in cat.sample_positions], dtype=float)
        if vals.size == 0:
            continue
        med = float(np.median(vals))
        markers.append(MedianMarker(
            label=cat.label,
            ordinal=cat.ordinal,
            median=med,
            x_start=cat.ordinal - half_width,
            x_end=cat.ordinal + half_width,
        ))
    return markers


def draw_medians(
    surface: RenderSurface,
    markers: Sequence[MedianMarker],
    *,
    color: RGB = DEFAULT_MEDIAN_COLOR,
    line_width: float = DEFAULT_MEDIAN_LINE_WIDTH,
) -> None:
    for m in markers:
        surface.draw_segment(m.x_start, m.x_end, m.median, color, line_width)
    logger.debug(f"drew {len(markers)} median markers")

"""Colour assignment for jitter plot samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from jitterplot.errors import ColorIndexError
from jitterplot.pipeline.categories import ordinal_map
from jitterplot.pipeline.model import RGB, Sample
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

# Every point is blue when no colour table is supplied.
DEFAULT_POINT_COLOR: RGB = (0.0, 0.0, 1.0)


@dataclass(frozen=True)
class ColorMapping:
    """Per-sample colours and the colour-category enumeration behind them.

    Attributes:
        colors: One RGB per sample, aligned with the samples passed to map_colors().
        ordinals: Colour label -> first-occurrence ordinal (row in the colour table).
        table: The colour table, or None when every sample uses the default colour.
    """
    colors: tuple[RGB, ...]
    ordinals: dict[str, int]
    table: Optional[np.ndarray]

    @property
    def has_table(self) -> bool:
        return self.table is not None

    @property
    def labels(self) -> list[str]:
        """Distinct colour-category labels in first-occurrence order."""
        return list(self.ordinals)


def _row_to_rgb(row: np.ndarray) -> RGB:
    return (float(row[0]), float(row[1]), float(row[2]))


def map_colors(
    samples: Sequence[Sample],
    colors: Optional[np.ndarray] = None,
    default_color: RGB = DEFAULT_POINT_COLOR,
) -> ColorMapping:
    """Assign each sample its colour.

    The colour label is the sample's colorgroup when present, else its group.
    Distinct colour labels are enumerated by first occurrence over ``samples``
    (already in display order), independently of the category ordinals, and
    each sample takes ``colors[ordinal]``.

    Raises:
        ColorIndexError: If an ordinal has no row in the colour table.
    """
    ordinals = ordinal_map(s.color_label for s in samples)

    if colors is None:
        return ColorMapping(
            colors=tuple(tuple(default_color) for _ in samples),
            ordinals=ordinals,
            table=None,
        )

    n_rows = colors.shape[0]
    rows: list[RGB] = []
    for sample in samples:
        idx = ordinals[sample.color_label]
        if idx >= n_rows:
            raise ColorIndexError(
                f"colour category {sample.color_label!r} has ordinal {idx} but colors has only {n_rows} rows"
            )
        rows.append(_row_to_rgb(colors[idx]))

    logger.debug(f"mapped {len(ordinals)} colour categories onto {len(samples)} samples")
    return ColorMapping(colors=tuple(rows), ordinals=ordinals, table=colors)


def to_plotly_color(rgb: Sequence[float]) -> str:
    """Convert an RGB triplet in [0, 1] to a Plotly 'rgb(r, g, b)' string."""
    r, g, b = (int(round(float(c) * 255)) for c in rgb)
    return f"rgb({r}, {g}, {b})"

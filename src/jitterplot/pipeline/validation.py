"""Input validation for jitter plots.

Checks that values, group labels, colour-group labels and an optional colour
table agree in length and type before any layout work starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from jitterplot.errors import (
    ColorTableSizeError,
    InvalidConfigError,
    ShapeMismatchError,
    ValueTypeError,
)
from jitterplot.pipeline.categories import stable_unique
from jitterplot.pipeline.model import Sample
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

_NUMERIC_KINDS = {"i", "u", "f"}  # int, unsigned, float (numpy dtype.kind)


@dataclass(frozen=True)
class ValidatedInputs:
    """Samples built from validated input vectors, plus the checked colour table.

    ``colors`` is None when no colour table was given (or it was empty);
    otherwise a float array of shape (n, 3).
    """
    samples: tuple[Sample, ...]
    colors: Optional[np.ndarray]
    has_colorgroup: bool

    @property
    def n_samples(self) -> int:
        return len(self.samples)


def _as_numeric_vector(values: Any) -> np.ndarray:
    try:
        arr = np.asarray(values)
    except ValueError as e:
        raise ShapeMismatchError(f"values must be a flat sequence of numbers: {e}") from e
    if arr.ndim != 1:
        raise ShapeMismatchError(f"values must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        return arr.astype(float)
    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise ValueTypeError(f"values must be numeric, got dtype {arr.dtype}")
    return arr.astype(float)


def _as_label_vector(labels: Any, name: str) -> list[str]:
    if isinstance(labels, (str, bytes)):
        raise ValueTypeError(f"{name} must be a sequence of labels, not a single string")
    out = list(labels)
    for i, label in enumerate(out):
        if not isinstance(label, str):
            raise ValueTypeError(
                f"{name}[{i}] is {type(label).__name__} ({label!r}); labels must be strings. "
                "Convert numeric labels with coerce_labels() first."
            )
    return out


def validate_color_table(colors: Any, n_required: int) -> Optional[np.ndarray]:
    """Validate a colour table against the number of colour categories it must cover.

    Args:
        colors: Sequence of RGB triplets (or a single triplet), channels in [0, 1].
        n_required: Number of distinct colour-category labels.

    Returns:
        Float array of shape (n, 3), or None when colors is None or empty.

    Raises:
        ValueTypeError: If entries are not numeric.
        ShapeMismatchError: If rows are not RGB triplets.
        InvalidConfigError: If a channel is outside [0, 1] or not finite.
        ColorTableSizeError: If there are fewer rows than n_required.
    """
    if colors is None:
        return None
    try:
        table = np.asarray(colors)
    except ValueError as e:
        raise ShapeMismatchError(f"colors rows must all be RGB triplets: {e}") from e
    if table.size == 0:
        return None
    if table.dtype.kind not in _NUMERIC_KINDS:
        raise ValueTypeError(f"colors must be numeric RGB triplets, got dtype {table.dtype}")
    if table.ndim == 1 and table.shape[0] == 3:
        table = table.reshape(1, 3)
    if table.ndim != 2 or table.shape[1] != 3:
        raise ShapeMismatchError(f"colors must have shape (n, 3), got {table.shape}")
    table = table.astype(float)
    if not np.all(np.isfinite(table)) or np.any(table < 0.0) or np.any(table > 1.0):
        raise InvalidConfigError("colors must contain RGB values in the range [0, 1]")
    if table.shape[0] < n_required:
        raise ColorTableSizeError(
            f"colors has {table.shape[0]} rows but {n_required} distinct colour categories need a colour"
        )
    return table


def validate_inputs(
    values: Sequence[float],
    groups: Sequence[str],
    colorgroup: Optional[Sequence[str]] = None,
    colors: Any = None,
) -> ValidatedInputs:
    """Validate raw input vectors and build the Sample sequence.

    Args:
        values: Numeric value per sample.
        groups: Primary category label per sample.
        colorgroup: Optional secondary label per sample (controls colour).
        colors: Optional colour table, one RGB row per colour category.

    Returns:
        ValidatedInputs with one Sample per observation, in input order.

    Raises:
        ShapeMismatchError: If lengths disagree.
        ValueTypeError: If values or colours are non-numeric, or labels are not strings.
        ColorTableSizeError: If the colour table is too small.
        InvalidConfigError: If colour channels are out of range.
    """
    vals = _as_numeric_vector(values)
    grp = _as_label_vector(groups, "groups")
    if len(grp) != len(vals):
        raise ShapeMismatchError(
            f"values and groups must have the same length, got {len(vals)} and {len(grp)}"
        )

    cgrp: Optional[list[str]] = None
    if colorgroup is not None:
        cgrp = _as_label_vector(colorgroup, "colorgroup")
        # An empty colorgroup means "not given", matching an empty optional argument
        if len(cgrp) == 0 and len(vals) > 0:
            cgrp = None
        elif len(cgrp) != len(vals):
            raise ShapeMismatchError(
                f"colorgroup must have the same length as values, got {len(cgrp)} and {len(vals)}"
            )

    color_labels = cgrp if cgrp is not None else grp
    table = validate_color_table(colors, len(stable_unique(color_labels)))

    samples = tuple(
        Sample(
            value=float(vals[i]),
            group=grp[i],
            colorgroup=cgrp[i] if cgrp is not None else None,
            index=i,
        )
        for i in range(len(vals))
    )
    n_rows = None if table is None else table.shape[0]
    logger.debug(f"validated {len(samples)} samples (colorgroup={cgrp is not None}, color rows={n_rows})")
    return ValidatedInputs(samples=samples, colors=table, has_colorgroup=cgrp is not None)

"""Category ordering for jitter plots.

Categories are shown in first-occurrence order of their labels unless the
caller forces an explicit display order. An explicit order must name every
group label exactly once; samples are then stably sorted so that each
category's samples keep their original relative order.
"""

from __future__ import annotations

import math
import numbers
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from jitterplot.errors import CategoryOrderError, ValueTypeError
from jitterplot.pipeline.model import Category, Sample
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)


def ordinal_map(labels: Iterable[str]) -> dict[str, int]:
    """Map each distinct label to its first-occurrence ordinal (single left-to-right scan)."""
    mapping: dict[str, int] = {}
    for label in labels:
        if label not in mapping:
            mapping[label] = len(mapping)
    return mapping


def stable_unique(labels: Iterable[str]) -> list[str]:
    """Distinct labels in the order they first appear."""
    return list(ordinal_map(labels))


@dataclass(frozen=True)
class CategoryResolution:
    """Result of resolve_categories().

    Attributes:
        samples: Samples in display order.
        categories: One Category per distinct group label, in display order.
        ordinals: Group label -> display ordinal.
        permutation: permutation[i] is the input position of resolved sample i.
    """
    samples: tuple[Sample, ...]
    categories: tuple[Category, ...]
    ordinals: dict[str, int]
    permutation: tuple[int, ...]

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.categories]


def _check_display_order(display_order: Sequence[str], groups: Sequence[str]) -> list[str]:
    """Return display_order as a list, raising CategoryOrderError unless it is an exact permutation."""
    if isinstance(display_order, str):
        raise CategoryOrderError(
            f"display_order must be a sequence of labels, not a single string {display_order!r}"
        )
    order = list(display_order)
    for label in order:
        if not isinstance(label, str):
            raise CategoryOrderError(
                f"display_order entries must be strings, got {type(label).__name__} {label!r}"
            )

    duplicates = sorted(label for label, n in Counter(order).items() if n > 1)
    if duplicates:
        raise CategoryOrderError(f"display_order lists categories more than once: {duplicates}")

    distinct = stable_unique(groups)
    order_set = set(order)
    distinct_set = set(distinct)
    missing = [g for g in distinct if g not in order_set]
    if missing:
        raise CategoryOrderError(f"display_order is missing categories present in groups: {missing}")
    unknown = [label for label in order if label not in distinct_set]
    if unknown:
        raise CategoryOrderError(f"display_order names categories not present in groups: {unknown}")
    return order


def resolve_categories(
    samples: Sequence[Sample],
    display_order: Optional[Sequence[str]] = None,
) -> CategoryResolution:
    """Determine category display order and reorder samples to match it.

    Args:
        samples: Samples in input order.
        display_order: Optional explicit order of group labels. None (or an
            empty sequence) keeps first-occurrence order.

    Returns:
        CategoryResolution with reordered samples and label -> ordinal mapping.

    Raises:
        CategoryOrderError: If display_order omits a group label, names an
            unknown label, or repeats a label.
    """
    groups = [s.group for s in samples]
    n = len(samples)

    if display_order is None or len(display_order) == 0:
        ordinals = ordinal_map(groups)
        permutation = tuple(range(n))
    else:
        order = _check_display_order(display_order, groups)
        ordinals = {label: i for i, label in enumerate(order)}
        # sorted() is stable: ties keep their input order
        permutation = tuple(sorted(range(n), key=lambda i: ordinals[groups[i]]))

    resolved = tuple(samples[i] for i in permutation)

    positions: dict[str, list[int]] = {label: [] for label in ordinals}
    for pos, sample in enumerate(resolved):
        positions[sample.group].append(pos)
    categories = tuple(
        Category(label=label, ordinal=ordinal, sample_positions=tuple(positions[label]))
        for label, ordinal in ordinals.items()
    )

    explicit = display_order is not None and len(display_order) > 0
    logger.debug(
        f"resolved {n} samples into {len(categories)} categories "
        f"(explicit order={explicit}): {list(ordinals)}"
    )
    return CategoryResolution(
        samples=resolved,
        categories=categories,
        ordinals=ordinals,
        permutation=permutation,
    )


def _format_number(x: numbers.Real) -> str:
    """Text form of a numeric label, following MATLAB num2str conventions."""
    if isinstance(x, numbers.Integral):
        return str(int(x))
    xf = float(x)
    if math.isnan(xf):
        return "NaN"
    if math.isinf(xf):
        return "Inf" if xf > 0 else "-Inf"
    if xf.is_integer():
        return str(int(xf))
    # 4 significant digits after the leading digit, more for large magnitudes
    digits = max(int(math.floor(math.log10(abs(xf)))) + 5, 5)
    return f"{xf:.{digits}g}"


def coerce_labels(labels: Iterable[object]) -> list[str]:
    """Convert a label vector with numeric entries (e.g. batch numbers) to strings.

    The pipeline only accepts string labels; call this on numeric label
    vectors first. Strings pass through unchanged.

    Examples:
        >>> coerce_labels([1, 2.0, 2.5, "x"])
        ['1', '2', '2.5', 'x']

    Raises:
        ValueTypeError: For entries that are neither strings nor real numbers
            (including None and booleans).
    """
    out: list[str] = []
    for label in labels:
        if isinstance(label, str):
            out.append(label)
        elif isinstance(label, numbers.Real) and not isinstance(label, bool):
            out.append(_format_number(label))
        else:
            raise ValueTypeError(
                f"cannot coerce label of type {type(label).__name__} ({label!r}) to text"
            )
    return out

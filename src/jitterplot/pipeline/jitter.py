"""Jittered horizontal placement of samples within their category band.

Each category occupies a band centred at its ordinal. A sample's x position is
``ordinal + offset`` with ``|offset| <= width / 2``; its y position is the raw
value.

Two spreading methods are available:

- ``"uniform"``: offsets drawn uniformly from the band.
- ``"density"``: uniform draws scaled by a Gaussian kernel density estimate of
  the category's values, relative to its peak. Points in crowded value ranges
  spread across the full band and isolated points stay near the centre, which
  is how swarm-style charts reduce overlap.

Jitter is reproducible when a seed is given: every category gets its own
generator seeded from ``(seed, crc32(label))``, so one category's offsets do
not change when other categories are added or removed.
"""

from __future__ import annotations

import math
import zlib
from typing import Optional, Sequence

import numpy as np

from jitterplot.errors import InvalidConfigError
from jitterplot.pipeline.model import RGB, Category, RenderSpec, Sample
from jitterplot.pipeline.surface import RenderSurface
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

JITTER_METHODS = ("density", "uniform")
DEFAULT_JITTER_WIDTH = 0.5


def category_rng(label: str, seed: Optional[int]) -> np.random.Generator:
    """Random generator for one category; fresh entropy when seed is None."""
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng([int(seed), zlib.crc32(label.encode("utf-8"))])


def density_scale(values: np.ndarray) -> np.ndarray:
    """Relative kernel density (in [0, 1]) at each value.

    Bandwidth follows Silverman's rule of thumb. Categories with fewer than two
    finite values, or no spread, get a scale of 1 everywhere; non-finite values
    also get 1.
    """
    values = np.asarray(values, dtype=float)
    scale = np.ones(values.shape, dtype=float)
    finite = np.isfinite(values)
    v = values[finite]
    if v.size < 2:
        return scale

    std = float(np.std(v, ddof=1))
    q75, q25 = np.percentile(v, [75, 25])
    iqr = float(q75 - q25)
    sigma = min(std, iqr / 1.34) if iqr > 0 else std
    if not sigma > 0:
        return scale

    bandwidth = 0.9 * sigma * v.size ** (-0.2)
    z = (v[:, None] - v[None, :]) / bandwidth
    dens = np.exp(-0.5 * z * z).sum(axis=1)
    scale[finite] = dens / dens.max()
    return scale


def jitter_offsets(
    values: Sequence[float],
    width: float,
    *,
    method: str = "density",
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Horizontal offsets for one category's values, each within [-width/2, width/2].

    Raises:
        InvalidConfigError: If width is negative or not finite, or method is unknown.
    """
    if not math.isfinite(width) or width < 0:
        raise InvalidConfigError(f"jitter width must be a finite number >= 0, got {width!r}")
    if method not in JITTER_METHODS:
        raise InvalidConfigError(f"unknown jitter method {method!r}; expected one of {JITTER_METHODS}")

    vals = np.asarray(values, dtype=float)
    half = width / 2.0
    if vals.size == 0 or half == 0:
        return np.zeros(vals.shape, dtype=float)

    if rng is None:
        rng = np.random.default_rng()
    u = rng.uniform(-1.0, 1.0, size=vals.size)
    if method == "density":
        u = u * density_scale(vals)
    return np.clip(u * half, -half, half)


def compute_render_specs(
    samples: Sequence[Sample],
    categories: Sequence[Category],
    colors: Sequence[RGB],
    width: float = DEFAULT_JITTER_WIDTH,
    *,
    method: str = "density",
    seed: Optional[int] = 0,
) -> tuple[RenderSpec, ...]:
    """Resolve x/y/colour for every sample.

    Args:
        samples: Samples in display order.
        categories: Group categories from resolve_categories(); their
            sample_positions index into ``samples``.
        colors: One RGB per sample, aligned with ``samples``.
        width: Maximum jitter width (band width).
        method: "density" or "uniform".
        seed: Jitter seed; None for non-reproducible jitter.

    Returns:
        One RenderSpec per sample, aligned with ``samples``.
    """
    if len(colors) != len(samples):
        raise ValueError(f"expected {len(samples)} colours, got {len(colors)}")

    specs: list[Optional[RenderSpec]] = [None] * len(samples)
    for cat in categories:
        cat_values = [samples[p].value for p in cat.sample_positions]
        offsets = jitter_offsets(cat_values, width, method=method, rng=category_rng(cat.label, seed))
        for pos, offset in zip(cat.sample_positions, offsets):
            specs[pos] = RenderSpec(
                x_position=cat.ordinal + float(offset),
                y_value=samples[pos].value,
                color=colors[pos],
                offset=float(offset),
            )

    missing = [i for i, s in enumerate(specs) if s is None]
    if missing:
        raise ValueError(f"samples at positions {missing} belong to no category")
    logger.debug(
        f"placed {len(specs)} samples across {len(categories)} categories (width={width}, method={method})"
    )
    return tuple(specs)  # type: ignore[arg-type]


def draw_points(
    surface: RenderSurface,
    samples: Sequence[Sample],
    specs: Sequence[RenderSpec],
    point_size: float,
) -> None:
    """Issue one point-draw call per sample."""
    for sample, spec in zip(samples, specs):
        surface.draw_point(spec.x_position, spec.y_value, spec.color, point_size, label=sample.group)

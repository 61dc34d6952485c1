"""Exception types raised by the jitter plot pipeline.

Every error is raised during validation or resolution, before the first draw
call reaches a rendering surface. Each class also derives from the matching
builtin so callers can catch ``ValueError`` / ``TypeError`` / ``IndexError``.
"""

from __future__ import annotations


class JitterPlotError(Exception):
    """Base class for all jitterplot errors."""


class ShapeMismatchError(JitterPlotError, ValueError):
    """Input vectors (values, groups, colorgroup, colour table) disagree in shape."""


class ValueTypeError(JitterPlotError, TypeError):
    """Values, labels or colour entries have the wrong type (e.g. non-numeric values)."""


class CategoryOrderError(JitterPlotError, ValueError):
    """An explicit display order is not a permutation of the distinct group labels."""


class ColorIndexError(JitterPlotError, IndexError):
    """A colour-category ordinal falls outside the colour table."""


class ColorTableSizeError(ColorIndexError):
    """The colour table has fewer rows than there are distinct colour categories."""


class InvalidConfigError(JitterPlotError, ValueError):
    """An option value is out of range (e.g. negative jitter width)."""

"""Data model shared by the jitter plot pipeline stages.

All entities are created per render call from the input vectors and are
never mutated afterwards, so they are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# RGB triplet, each channel in [0, 1].
RGB = tuple[float, float, float]


@dataclass(frozen=True)
class Sample:
    """One input observation.

    Attributes:
        value: Numeric value, plotted unchanged on the y axis.
        group: Primary category label (x-axis band).
        colorgroup: Optional secondary label controlling colour.
        index: Position of the observation in the caller's input vectors.
    """
    value: float
    group: str
    colorgroup: Optional[str] = None
    index: int = 0

    @property
    def color_label(self) -> str:
        """Label used for colouring: colorgroup when present, else group."""
        return self.colorgroup if self.colorgroup is not None else self.group


@dataclass(frozen=True)
class Category:
    """A distinct label with its display ordinal and member sample positions.

    ``sample_positions`` index into the resolved (possibly reordered) sample
    sequence, not into the caller's input vectors.
    """
    label: str
    ordinal: int
    sample_positions: tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.sample_positions)


@dataclass(frozen=True)
class RenderSpec:
    """Resolved drawing attributes for one sample."""
    x_position: float
    y_value: float
    color: RGB
    offset: float = 0.0


@dataclass(frozen=True)
class MedianMarker:
    """Horizontal median segment for one group category."""
    label: str
    ordinal: int
    median: float
    x_start: float
    x_end: float


@dataclass(frozen=True)
class LegendEntry:
    """Legend swatch pairing a colour-category label with its colour."""
    label: str
    color: RGB

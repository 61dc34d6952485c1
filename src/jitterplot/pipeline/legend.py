"""Legend entries for colour categories."""

from __future__ import annotations

from typing import Sequence

from jitterplot.pipeline.colors import ColorMapping
from jitterplot.pipeline.model import LegendEntry
from jitterplot.pipeline.surface import RenderSurface


def build_legend(show_legend: bool, mapping: ColorMapping) -> list[LegendEntry]:
    """Legend entries, one per distinct colour label in first-occurrence order.

    Empty unless both the legend flag is set and a colour table was supplied.
    """
    if not show_legend or mapping.table is None:
        return []
    table = mapping.table
    return [
        LegendEntry(
            label=label,
            color=(float(table[i][0]), float(table[i][1]), float(table[i][2])),
        )
        for label, i in mapping.ordinals.items()
    ]


def draw_legend(surface: RenderSurface, entries: Sequence[LegendEntry]) -> None:
    """Add one swatch per entry; with no entries the legend is switched off."""
    for entry in entries:
        surface.add_legend_entry(entry.label, entry.color)
    surface.show_legend(bool(entries))

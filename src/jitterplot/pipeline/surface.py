"""Rendering surfaces for jitter plots.

The pipeline only talks to a surface through the RenderSurface protocol.
PlotlySurface draws into a Plotly figure; RecordingSurface keeps every call in
memory (useful for tests and for callers that render somewhere else).

A surface is owned by one render call at a time; sharing a surface between
concurrent calls is not supported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

import plotly.graph_objects as go

from jitterplot.pipeline.colors import to_plotly_color
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

TITLE_FONT_SIZE = 16
LABEL_FONT_SIZE = 14
FONT_FAMILY = "Helvetica"
LEGEND_MARKER_SIZE = 8


class RenderSurface(Protocol):
    """Drawing operations the pipeline needs from a canvas/figure."""

    def set_title(self, title: str) -> None: ...

    def set_axis_labels(self, x_label: str, y_label: str) -> None: ...

    def set_categories(self, labels: Sequence[str], *, padding: float = 0.5) -> None: ...

    def draw_point(
        self, x: float, y: float, color: Sequence[float], size: float, *, label: str = ""
    ) -> None: ...

    def draw_segment(
        self, x0: float, x1: float, y: float, color: Sequence[float], width: float
    ) -> None: ...

    def add_legend_entry(self, label: str, color: Sequence[float]) -> None: ...

    def show_legend(self, visible: bool) -> None: ...

    def finish(self) -> None: ...


class PlotlySurface:
    """RenderSurface backed by a plotly ``go.Figure``.

    Points are buffered and written as a single marker trace the next time a
    different primitive is drawn (or on finish()), so draw order is kept:
    median lines drawn after the points sit on top of them.

    Attributes:
        figure: The underlying plotly figure (the render context handle).
    """

    def __init__(self, figure: Optional[go.Figure] = None) -> None:
        self.figure = figure if figure is not None else go.Figure()
        self._px: list[float] = []
        self._py: list[float] = []
        self._pcolor: list[str] = []
        self._psize: list[float] = []
        self._plabel: list[str] = []
        self.figure.update_layout(
            plot_bgcolor="white",
            showlegend=False,
            margin=dict(l=60, r=20, t=50, b=60),
            uirevision="keep",
        )

    def set_title(self, title: str) -> None:
        if not title:
            return
        self.figure.update_layout(
            title=dict(text=title, font=dict(size=TITLE_FONT_SIZE, family=FONT_FAMILY)),
        )

    def set_axis_labels(self, x_label: str, y_label: str) -> None:
        if x_label:
            self.figure.update_xaxes(
                title=dict(text=x_label, font=dict(size=LABEL_FONT_SIZE, family=FONT_FAMILY)),
            )
        if y_label:
            self.figure.update_yaxes(
                title=dict(text=y_label, font=dict(size=LABEL_FONT_SIZE, family=FONT_FAMILY)),
            )

    def set_categories(self, labels: Sequence[str], *, padding: float = 0.5) -> None:
        """Label the x axis with category names at their ordinal positions."""
        n = len(labels)
        self.figure.update_xaxes(
            tickmode="array",
            tickvals=list(range(n)),
            ticktext=list(labels),
            range=[-padding, (n - 1) + padding] if n else None,
            showline=True,
            linecolor="black",
            zeroline=False,
        )
        self.figure.update_yaxes(showline=True, linecolor="black", zeroline=False)

    def draw_point(
        self, x: float, y: float, color: Sequence[float], size: float, *, label: str = ""
    ) -> None:
        self._px.append(x)
        self._py.append(y)
        self._pcolor.append(to_plotly_color(color))
        self._psize.append(size)
        self._plabel.append(label)

    def _flush_points(self) -> None:
        if not self._px:
            return
        self.figure.add_trace(go.Scatter(
            x=self._px,
            y=self._py,
            mode="markers",
            name="samples",
            marker=dict(color=self._pcolor, size=self._psize),
            customdata=self._plabel,
            hovertemplate="%{customdata}<br>%{y}<extra></extra>",
            showlegend=False,  # legend only lists explicit swatches
        ))
        logger.debug(f"flushed {len(self._px)} points into one marker trace")
        self._px, self._py, self._pcolor, self._psize, self._plabel = [], [], [], [], []

    def draw_segment(
        self, x0: float, x1: float, y: float, color: Sequence[float], width: float
    ) -> None:
        self._flush_points()
        self.figure.add_trace(go.Scatter(
            x=[x0, x1],
            y=[y, y],
            mode="lines",
            line=dict(color=to_plotly_color(color), width=width),
            showlegend=False,
            hoverinfo="skip",
        ))

    def add_legend_entry(self, label: str, color: Sequence[float]) -> None:
        self._flush_points()
        # Off-canvas swatch: the trace has no visible data, only a legend item
        self.figure.add_trace(go.Scatter(
            x=[None],
            y=[None],
            mode="markers",
            name=label,
            marker=dict(color=to_plotly_color(color), size=LEGEND_MARKER_SIZE),
            showlegend=True,
        ))

    def show_legend(self, visible: bool) -> None:
        self.figure.update_layout(showlegend=visible)

    def finish(self) -> None:
        self._flush_points()

    def to_dict(self) -> dict:
        """Plotly figure dictionary (flushes pending points first)."""
        self.finish()
        return self.figure.to_dict()


@dataclass
class RecordingSurface:
    """RenderSurface that records every drawing call in memory."""
    title: str = ""
    x_label: str = ""
    y_label: str = ""
    categories: list[str] = field(default_factory=list)
    points: list[dict[str, Any]] = field(default_factory=list)
    segments: list[dict[str, Any]] = field(default_factory=list)
    legend_entries: list[tuple[str, tuple[float, ...]]] = field(default_factory=list)
    legend_visible: bool = False
    finished: bool = False
    calls: list[str] = field(default_factory=list)

    def set_title(self, title: str) -> None:
        self.calls.append("set_title")
        self.title = title

    def set_axis_labels(self, x_label: str, y_label: str) -> None:
        self.calls.append("set_axis_labels")
        self.x_label = x_label
        self.y_label = y_label

    def set_categories(self, labels: Sequence[str], *, padding: float = 0.5) -> None:
        self.calls.append("set_categories")
        self.categories = list(labels)

    def draw_point(
        self, x: float, y: float, color: Sequence[float], size: float, *, label: str = ""
    ) -> None:
        self.calls.append("draw_point")
        self.points.append({"x": x, "y": y, "color": tuple(color), "size": size, "label": label})

    def draw_segment(
        self, x0: float, x1: float, y: float, color: Sequence[float], width: float
    ) -> None:
        self.calls.append("draw_segment")
        self.segments.append({"x0": x0, "x1": x1, "y": y, "color": tuple(color), "width": width})

    def add_legend_entry(self, label: str, color: Sequence[float]) -> None:
        self.calls.append("add_legend_entry")
        self.legend_entries.append((label, tuple(color)))

    def show_legend(self, visible: bool) -> None:
        self.calls.append("show_legend")
        self.legend_visible = visible

    def finish(self) -> None:
        self.calls.append("finish")
        self.finished = True

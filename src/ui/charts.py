from __future__ import annotations

from collections.abc import Callable
from typing import Any

import plotly.graph_objects as go
import streamlit as st

from src.config import COLOR_TEXT_GRAY, PLOTLY_CONFIG


class ChartMount:
    """One drawing surface (a Streamlit placeholder) and the chart currently on it.

    ``mount`` always unmounts the previous figure first, so repeated renders
    replace the chart instead of stacking a second one on the same surface.
    """

    def __init__(self, key: str, surface_factory: Callable[[], Any] | None = None) -> None:
        self.key = key
        self._surface_factory = surface_factory or st.empty
        self._surface: Any = None
        self.figure: go.Figure | None = None
        self.generation = 0

    def bind(self) -> None:
        """Reserve the surface at the current position of the layout."""
        if self._surface is None:
            self._surface = self._surface_factory()

    @property
    def mounted(self) -> bool:
        return self.figure is not None

    def unmount(self) -> None:
        if self._surface is not None and self.figure is not None:
            self._surface.empty()
        self.figure = None

    def mount(self, fig: go.Figure) -> None:
        self.unmount()
        self.bind()
        self.generation += 1
        # element keys must be unique within one script run
        self._surface.plotly_chart(
            fig,
            use_container_width=True,
            theme=None,
            config=PLOTLY_CONFIG,
            key=f"{self.key}-{self.generation}",
        )
        self.figure = fig


def base_layout(fig: go.Figure, height: int, y_title: str) -> go.Figure:
    """Shared dark, animation-free layout for both forecast charts."""
    fig.update_layout(
        title=None,
        margin=dict(l=50, r=10, t=24, b=40),
        height=height,
        autosize=True,
        transition=dict(duration=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        font=dict(color=COLOR_TEXT_GRAY),
        legend=dict(orientation="h", y=1.12, x=0),
        xaxis=dict(gridcolor="rgba(255,255,255,0.08)"),
        yaxis=dict(gridcolor="rgba(255,255,255,0.08)", title=y_title, automargin=True),
    )
    return fig

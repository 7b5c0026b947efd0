from __future__ import annotations

import plotly.graph_objects as go

from src.api.weather_viewmodel import build_hourly_chart_data
from src.config import COLOR_LINE, HOURLY_CHART_HEIGHT
from src.ui.charts import ChartMount, base_layout
from src.viewmodels.presentation import PresentationState


def build_hourly_figure(data: dict) -> go.Figure:
    fig = go.Figure(
        [
            go.Scatter(
                x=data["labels"],
                y=[round(v, 1) for v in data["values"]],
                name=data["series"],
                mode="lines+markers",
                line=dict(color=COLOR_LINE, width=2),
                marker=dict(size=5),
                hovertemplate="<b>%{x}</b><br>%{y}<extra></extra>",
                showlegend=True,
            )
        ]
    )
    fig.update_xaxes(type="category")
    return base_layout(fig, HOURLY_CHART_HEIGHT, data["unit"])


def card_hourly(state: PresentationState, mount: ChartMount) -> None:
    """24-hour temperature line chart in the currently selected unit."""
    if state.last_forecast is None:
        return
    data = build_hourly_chart_data(state.last_forecast, state.unit)
    mount.mount(build_hourly_figure(data))

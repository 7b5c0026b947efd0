from __future__ import annotations

import plotly.graph_objects as go

from src.api.weather_viewmodel import build_daily_chart_data
from src.config import COLOR_MAX, COLOR_MIN, DAILY_CHART_HEIGHT
from src.ui.charts import ChartMount, base_layout
from src.viewmodels.presentation import PresentationState


def build_daily_figure(data: dict) -> go.Figure:
    fig = go.Figure(
        [
            go.Bar(
                x=data["labels"],
                y=[round(v, 1) for v in data["min_values"]],
                name=data["min_series"],
                marker=dict(color=COLOR_MIN),
                hovertemplate="<b>%{x}</b><br>%{y}<extra>Min</extra>",
            ),
            go.Bar(
                x=data["labels"],
                y=[round(v, 1) for v in data["max_values"]],
                name=data["max_series"],
                marker=dict(color=COLOR_MAX),
                hovertemplate="<b>%{x}</b><br>%{y}<extra>Max</extra>",
            ),
        ]
    )
    fig.update_layout(barmode="group")
    # keep API order; plotly would otherwise try to parse "Mon" etc.
    fig.update_xaxes(type="category")
    return base_layout(fig, DAILY_CHART_HEIGHT, data["unit"])


def card_daily(state: PresentationState, mount: ChartMount) -> None:
    """7-day min/max grouped bar chart in the currently selected unit."""
    if state.last_forecast is None:
        return
    data = build_daily_chart_data(state.last_forecast, state.unit)
    mount.mount(build_daily_figure(data))

from __future__ import annotations

import html

from src.api.weather_viewmodel import CurrentConditionsView, build_current_view
from src.ui.common import card
from src.viewmodels.presentation import PresentationState


def _field(label: str, value: str, css: str) -> str:
    return (
        f"<div class='wx-field {css}'>"
        f"<div class='wx-label'>{label}</div>"
        f"<div class='wx-value'>{html.escape(value)}</div>"
        "</div>"
    )


def build_current_html(view: CurrentConditionsView) -> str:
    # single line: markdown would treat indented lines as a code block
    return "".join(
        [
            "<div class='wx-current'>",
            f"<div class='wx-icon weather-icon'>{view.icon}</div>",
            "<div class='wx-main'>",
            f"<div class='wx-location current-location'>{html.escape(view.location)}</div>",
            f"<div class='wx-description current-description'>{html.escape(view.description)}</div>",
            "</div>",
            "<div class='wx-grid'>",
            _field("Temperature", view.temperature, "current-temp"),
            _field("Feels like", view.feels_like, "current-feels"),
            _field("Humidity", view.humidity, "current-humidity"),
            _field("Wind", view.wind, "current-wind"),
            "</div>",
            "</div>",
        ]
    )


def card_current(state: PresentationState, surface=None) -> None:
    """Current conditions for the last fetched location, in the selected unit."""
    if state.last_location is None or state.last_forecast is None:
        return
    view = build_current_view(state.last_location, state.last_forecast, state.unit)
    card("Current conditions", build_current_html(view), height_dvh=14, surface=surface)


def card_current_empty(surface=None) -> None:
    card(
        "Current conditions",
        "<span class='hint'>No data yet. Search for a city or use your location.</span>",
        height_dvh=14,
        surface=surface,
    )

# main.py
"""Main entry point for the weather dashboard Streamlit application."""

import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import (
    ChartMount,
    card_current,
    card_current_empty,
    card_daily,
    card_hourly,
    card_search,
)
from src.ui.card_search import CITY_INPUT_KEY
from src.ui.common import load_css, section_title, status_line
from src.ui.geolocation_probe import geolocation_probe, geolocation_support
from src.viewmodels.dashboard import Renderer, WeatherDashboard
from src.viewmodels.presentation import PresentationState, get_state

ensure_dirs()

# Setup logging
logger = setup_logging()


def _dashboard(renderers: list[Renderer] | None = None) -> WeatherDashboard:
    return WeatherDashboard(get_state(st.session_state), renderers=renderers or ())


# --- button callbacks (run before the script body) ----------------------------
def _on_search() -> None:
    _dashboard().search_city(st.session_state.get(CITY_INPUT_KEY, ""))


def _on_locate() -> None:
    _dashboard().request_location()


def _on_toggle() -> None:
    _dashboard().toggle_unit()


def _run_geolocation(state: PresentationState) -> None:
    """Mount the browser location components and hand their answers to the dashboard."""
    if state.geolocation_supported is None:
        state.geolocation_supported = geolocation_support()

    if not state.geolocation_pending:
        return

    result = geolocation_probe(state.geolocation_attempt)
    if result is not None:
        _dashboard().handle_location_result(result)


def main() -> None:
    """Initialize and render the weather dashboard layout."""
    try:
        st.set_page_config(
            page_title="Weather Dashboard",
            layout="wide",
            page_icon="🌦️",
        )
        load_css("style.css")

        state = get_state(st.session_state)

        # Row 1: search + buttons + status
        section_title("🌦️ Weather Dashboard", mt=4, mb=8)
        card_search(state, on_search=_on_search, on_locate=_on_locate, on_toggle=_on_toggle)
        status_surface = st.empty()
        # the browser's answer may change the status, so it is drawn afterwards
        _run_geolocation(state)
        status_line(state.status, surface=status_surface)

        # Row 2: current conditions
        current_surface = st.empty()

        # Row 3: charts
        col1, col2 = st.columns(2, gap="small")
        with col1:
            section_title("🕒 Next 24 hours", mt=14, mb=4)
            hourly_mount = ChartMount("hourly-chart")
            hourly_mount.bind()
        with col2:
            section_title("📅 7-day min / max", mt=14, mb=4)
            daily_mount = ChartMount("daily-chart")
            daily_mount.bind()

        dashboard = _dashboard(
            renderers=[
                lambda s: card_current(s, surface=current_surface),
                lambda s: card_hourly(s, hourly_mount),
                lambda s: card_daily(s, daily_mount),
            ]
        )
        if not dashboard.render():
            card_current_empty(surface=current_surface)

    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        st.error("Something went wrong while drawing the dashboard.")


if __name__ == "__main__":
    main()

# src/viewmodels/presentation.py
from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from src.api.geocoding import Location
from src.api.units import DisplayUnit
from src.api.weather_fetch import ForecastPayload
from src.config import DEFAULT_UNIT

SESSION_KEY = "weather_presentation_state"


def initial_status(unit: DisplayUnit) -> str:
    return f"Enter a city or use your location to begin. Default unit: {unit.glyph}"


@dataclass
class PresentationState:
    """Everything the renderers need between Streamlit reruns."""

    last_location: Location | None = None
    last_forecast: ForecastPayload | None = None
    unit: DisplayUnit = DisplayUnit.FAHRENHEIT
    status: str = ""
    request_seq: int = 0
    geolocation_pending: bool = False
    geolocation_attempt: int = 0
    # None until the browser has reported whether it has a geolocation API
    geolocation_supported: bool | None = None

    @property
    def has_forecast(self) -> bool:
        return self.last_location is not None and self.last_forecast is not None

    def next_ticket(self) -> int:
        """Tag a new fetch; only the newest ticket may commit its result."""
        self.request_seq += 1
        return self.request_seq

    def is_current(self, ticket: int) -> bool:
        return ticket == self.request_seq

    def store(self, location: Location, forecast: ForecastPayload) -> None:
        self.last_location = location
        self.last_forecast = forecast


def new_state(default_unit: str = DEFAULT_UNIT) -> PresentationState:
    unit = DisplayUnit.parse(default_unit)
    return PresentationState(unit=unit, status=initial_status(unit))


def get_state(session: MutableMapping[str, Any]) -> PresentationState:
    """Fetch the session's state object, creating it on the first run."""
    state = session.get(SESSION_KEY)
    if not isinstance(state, PresentationState):
        state = new_state()
        session[SESSION_KEY] = state
    return state

# src/viewmodels/dashboard.py
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from src.api.errors import (
    DashboardError,
    FetchError,
    LocationPermissionError,
    ValidationError,
)
from src.api.geocoding import Location, device_location, resolve_city
from src.api.geolocation import ERROR_UNSUPPORTED, GeolocationResult
from src.api.weather_fetch import ForecastPayload, fetch_forecast
from src.viewmodels.presentation import PresentationState

logger = logging.getLogger("weatherdash")

Renderer = Callable[[PresentationState], None]

STATUS_FETCHING = "Fetching weather data..."
STATUS_DETECTING = "Detecting your location..."
STATUS_UNSUPPORTED = "Geolocation is not supported."


def _validate_city(text: str | None) -> str:
    city = (text or "").strip()
    if not city:
        raise ValidationError()
    return city


def _location_from_result(result: GeolocationResult) -> Location:
    if not result.ok:
        raise LocationPermissionError()
    return device_location(result.latitude, result.longitude)


class WeatherDashboard:
    """Turns user actions into resolve → fetch → store → render, with status messages.

    Each fetch takes a ticket from ``state.request_seq``. A result whose ticket
    is no longer the newest is dropped, so an older, slower request can never
    overwrite the data of a newer one.
    """

    def __init__(
        self,
        state: PresentationState,
        renderers: Iterable[Renderer] = (),
        resolve: Callable[[str], Location] | None = None,
        fetch: Callable[[float, float], ForecastPayload] | None = None,
    ) -> None:
        self.state = state
        self.renderers = list(renderers)
        self._resolve = resolve or resolve_city
        self._fetch = fetch or fetch_forecast
        self.render_count = 0

    # --- status & rendering ----------------------------------------------------
    def set_status(self, message: str) -> None:
        self.state.status = message

    def render(self) -> bool:
        """Redraw every view from the stored forecast. False when there is nothing to draw."""
        if not self.state.has_forecast:
            return False
        for renderer in self.renderers:
            renderer(self.state)
        self.render_count += 1
        return True

    def _commit(self, ticket: int, location: Location, forecast: ForecastPayload) -> bool:
        if not self.state.is_current(ticket):
            logger.info("Dropping stale forecast for %s (ticket %s)", location.label, ticket)
            return False
        self.state.store(location, forecast)
        self.render()
        self.set_status(f"Showing weather for {location.label}")
        logger.info("Showing weather for %s", location.label)
        return True

    # --- actions ---------------------------------------------------------------
    def search_city(self, text: str | None) -> bool:
        """Search-by-city. Returns True when new data was stored."""
        try:
            city = _validate_city(text)
        except ValidationError as e:
            self.set_status(e.message)
            return False

        ticket = self.state.next_ticket()
        self.set_status(STATUS_FETCHING)
        try:
            location = self._resolve(city)
            forecast = self._fetch(location.latitude, location.longitude)
        except DashboardError as e:
            # NotFoundError text is shown as is, FetchError carries a generic message
            logger.warning("Search for %r failed: %s", city, e)
            if self.state.is_current(ticket):
                self.set_status(e.message)
            return False

        return self._commit(ticket, location, forecast)

    def request_location(self) -> bool:
        """Use-my-location, first half: ask the browser for a position.

        A browser already known to lack the API is refused before anything
        is shown as detecting. Returns True when a position request is pending.
        """
        if self.state.geolocation_supported is False:
            self.set_status(STATUS_UNSUPPORTED)
            return False
        self.state.geolocation_attempt += 1
        self.state.geolocation_pending = True
        self.set_status(STATUS_DETECTING)
        return True

    def handle_location_result(self, result: GeolocationResult) -> bool:
        """Use-my-location, second half: the browser answered."""
        self.state.geolocation_pending = False

        if result.error == ERROR_UNSUPPORTED:
            self.state.geolocation_supported = False
            self.set_status(STATUS_UNSUPPORTED)
            return False

        try:
            location = _location_from_result(result)
        except LocationPermissionError as e:
            logger.info("Geolocation failed: %s", result.error)
            self.set_status(e.message)
            return False

        ticket = self.state.next_ticket()
        self.set_status(STATUS_FETCHING)
        try:
            forecast = self._fetch(location.latitude, location.longitude)
        except DashboardError as e:
            logger.warning("Forecast for device location failed: %s", e)
            if self.state.is_current(ticket):
                self.set_status(FetchError.default_message)
            return False

        return self._commit(ticket, location, forecast)

    def toggle_unit(self) -> bool:
        """Flip °F/°C and redraw from stored data. Never touches the network."""
        self.state.unit = self.state.unit.other
        rendered = self.render()
        self.set_status(f"Switched to {self.state.unit.glyph}")
        return rendered

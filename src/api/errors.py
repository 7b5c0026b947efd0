from __future__ import annotations


class DashboardError(Exception):
    """Base class for errors that end up as a status message."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DashboardError):
    """User input rejected before any network call."""

    default_message = "Please enter a city."


class NotFoundError(DashboardError):
    """Geocoding returned no match for the searched name."""

    default_message = "City not found."


class FetchError(DashboardError):
    """Network failure, HTTP error or a malformed response body."""

    default_message = "Weather fetch failed."


class LocationPermissionError(DashboardError):
    """Browser geolocation was denied, failed or is not available."""

    default_message = "Location permission denied."

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.api.weather_utils import as_float

# Keys of the value the browser component sends back (see assets/geolocation/index.html)
KEY_LAT = "latitude"
KEY_LON = "longitude"
KEY_ERROR = "error"
KEY_SUPPORTED = "supported"

ERROR_UNSUPPORTED = "unsupported"
ERROR_DENIED = "denied"


@dataclass(frozen=True)
class GeolocationResult:
    """Outcome of one browser position request: coordinates or an error kind."""

    latitude: float | None = None
    longitude: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.latitude is not None and self.longitude is not None


def read_geolocation_value(value: Any) -> GeolocationResult | None:
    """
    Parse the component's answer. None while the browser has not answered.
    Garbled coordinates count as a platform error.
    """
    if not isinstance(value, dict):
        return None

    error = value.get(KEY_ERROR)
    if error:
        kind = str(error).strip().lower()
        return GeolocationResult(error=ERROR_UNSUPPORTED if kind == ERROR_UNSUPPORTED else ERROR_DENIED)

    if KEY_LAT not in value and KEY_LON not in value:
        return None

    lat = as_float(value.get(KEY_LAT))
    lon = as_float(value.get(KEY_LON))
    if lat is None or lon is None:
        return GeolocationResult(error=ERROR_DENIED)
    return GeolocationResult(latitude=lat, longitude=lon)


def read_support_value(value: Any) -> bool | None:
    """True/False once the browser has said whether it has a geolocation API."""
    if not isinstance(value, dict) or KEY_SUPPORTED not in value:
        return None
    return bool(value[KEY_SUPPORTED])

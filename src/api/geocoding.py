from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.api.errors import FetchError, NotFoundError
from src.api.http import http_get_json
from src.api.weather_utils import as_float
from src.config import DEVICE_LOCATION_LABEL, GEO_URL, UNKNOWN_CITY_LABEL

logger = logging.getLogger("weatherdash")


@dataclass(frozen=True)
class Location:
    """Resolved place: display label plus coordinates."""

    label: str
    latitude: float
    longitude: float


def build_location_label(result: dict[str, Any]) -> str:
    """'<name>, <region>, <country>', skipping empty parts."""
    label = result.get("name") or UNKNOWN_CITY_LABEL

    region = result.get("admin1")
    if region:
        label += f", {region}"

    country = result.get("country")
    if country:
        label += f", {country}"

    return label


def resolve_city(name: str) -> Location:
    """Geocode a free-text city name. Only the first match is used."""
    data = http_get_json(GEO_URL, params={"name": name, "count": 1})

    results = data.get("results") or []
    if not isinstance(results, list):
        raise FetchError("Location lookup failed.")
    if not results:
        logger.info("Geocoding found nothing for %r", name)
        raise NotFoundError("City not found.")

    first = results[0]
    if not isinstance(first, dict):
        raise FetchError("Location lookup failed.")
    lat = as_float(first.get("latitude"))
    lon = as_float(first.get("longitude"))
    if lat is None or lon is None:
        raise FetchError("Location lookup failed.")

    return Location(label=build_location_label(first), latitude=lat, longitude=lon)


def device_location(lat: float, lon: float) -> Location:
    """Coordinates from the browser; no geocoding call."""
    return Location(label=DEVICE_LOCATION_LABEL, latitude=float(lat), longitude=float(lon))

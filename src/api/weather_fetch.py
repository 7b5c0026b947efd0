from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from src.api.errors import FetchError
from src.api.http import http_get_json
from src.api.weather_utils import as_float, as_int, date_series, datetime_series, float_series
from src.config import WEATHER_URL

logger = logging.getLogger("weatherdash")


@dataclass(frozen=True)
class HourlySeries:
    timestamps: tuple[datetime, ...]
    temperatures_c: tuple[float, ...]


@dataclass(frozen=True)
class DailySeries:
    dates: tuple[date, ...]
    min_temperatures_c: tuple[float, ...]
    max_temperatures_c: tuple[float, ...]


@dataclass(frozen=True)
class ForecastPayload:
    """One forecast response, temperatures in Celsius as delivered by the API."""

    current_temperature_c: float
    current_wind_speed: float
    current_weather_code: int
    hourly: HourlySeries
    daily: DailySeries


def forecast_params(lat: float, lon: float) -> dict[str, Any]:
    return {
        "latitude": lat,
        "longitude": lon,
        "current_weather": "true",
        "hourly": "temperature_2m",
        "daily": "temperature_2m_min,temperature_2m_max",
        "timezone": "auto",
    }


def fetch_forecast(lat: float, lon: float) -> ForecastPayload:
    """Fetch and parse the forecast for the given coordinates. One attempt only."""
    data = http_get_json(WEATHER_URL, params=forecast_params(lat, lon))
    return parse_forecast(data)


# --- parsing -------------------------------------------------------------------
def _malformed(reason: str) -> FetchError:
    logger.warning("Malformed forecast response: %s", reason)
    return FetchError()


def _block(data: dict[str, Any], *keys: str) -> dict[str, Any]:
    for key in keys:
        block = data.get(key)
        if isinstance(block, dict):
            return block
    raise _malformed(f"missing '{keys[0]}' block")


def _list_field(block: dict[str, Any], key: str) -> list[Any]:
    values = block.get(key)
    if not isinstance(values, list):
        raise _malformed(f"missing list '{key}'")
    return values


def _parse_current(data: dict[str, Any]) -> tuple[float, float, int]:
    # current_weather=true gives 'current_weather'; the newer API names it 'current'
    current = _block(data, "current_weather", "current")
    temp = as_float(current.get("temperature"))
    wind = as_float(current.get("windspeed"))
    code = as_int(current.get("weathercode"))
    if temp is None or wind is None or code is None:
        raise _malformed("incomplete current conditions")
    return temp, wind, code


def _parse_hourly(data: dict[str, Any]) -> HourlySeries:
    hourly = _block(data, "hourly")
    times = _list_field(hourly, "time")
    temps = _list_field(hourly, "temperature_2m")
    if len(times) != len(temps):
        raise _malformed("hourly arrays differ in length")

    timestamps = datetime_series(times)
    temperatures = float_series(temps)
    if timestamps is None or temperatures is None:
        raise _malformed("unparsable hourly values")
    return HourlySeries(timestamps=timestamps, temperatures_c=temperatures)


def _parse_daily(data: dict[str, Any]) -> DailySeries:
    daily = _block(data, "daily")
    times = _list_field(daily, "time")
    mins = _list_field(daily, "temperature_2m_min")
    maxs = _list_field(daily, "temperature_2m_max")
    if not len(times) == len(mins) == len(maxs):
        raise _malformed("daily arrays differ in length")

    dates = date_series(times)
    min_c = float_series(mins)
    max_c = float_series(maxs)
    if dates is None or min_c is None or max_c is None:
        raise _malformed("unparsable daily values")
    return DailySeries(dates=dates, min_temperatures_c=min_c, max_temperatures_c=max_c)


def parse_forecast(data: dict[str, Any]) -> ForecastPayload:
    """Raw Open-Meteo JSON → ForecastPayload, or FetchError when fields are missing."""
    temp, wind, code = _parse_current(data)
    return ForecastPayload(
        current_temperature_c=temp,
        current_wind_speed=wind,
        current_weather_code=code,
        hourly=_parse_hourly(data),
        daily=_parse_daily(data),
    )

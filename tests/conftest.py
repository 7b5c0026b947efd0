from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.api.geocoding import Location
from src.api.weather_fetch import ForecastPayload, parse_forecast


def make_raw_forecast(
    hours: int = 30,
    days: int = 7,
    temp_c: float = 20.0,
    code: int = 61,
) -> dict:
    """Open-Meteo shaped response; hourly series starts 2025-06-02 (a Monday) 00:00."""
    start = datetime(2025, 6, 2, 0, 0)
    return {
        "timezone": "Europe/Paris",
        "current_weather": {"temperature": temp_c, "windspeed": 12.5, "weathercode": code},
        "hourly": {
            "time": [(start + timedelta(hours=h)).strftime("%Y-%m-%dT%H:%M") for h in range(hours)],
            "temperature_2m": [10.0 + h * 0.5 for h in range(hours)],
        },
        "daily": {
            "time": [(start + timedelta(days=d)).strftime("%Y-%m-%d") for d in range(days)],
            "temperature_2m_min": [5.0 + d for d in range(days)],
            "temperature_2m_max": [15.0 + d for d in range(days)],
        },
    }


@pytest.fixture
def raw_forecast() -> dict:
    return make_raw_forecast()


@pytest.fixture
def forecast() -> ForecastPayload:
    return parse_forecast(make_raw_forecast())


@pytest.fixture
def paris() -> Location:
    return Location(label="Paris, Île-de-France, France", latitude=48.85, longitude=2.35)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pandas as pd

from src.api.geocoding import Location
from src.api.units import DisplayUnit, convert_temperature, format_temperature, toggle_label
from src.api.weather_fetch import ForecastPayload
from src.api.wmo_icon_map import classify_weather_code
from src.config import DAILY_POINTS, HOURLY_POINTS, HUMIDITY_PLACEHOLDER, WIND_SUFFIX


@dataclass
class CurrentConditionsView:
    """Ready-to-print text for the current conditions card."""

    location: str
    description: str
    icon: str
    temperature: str
    feels_like: str  # the API has no apparent temperature, same value as temperature
    humidity: str
    wind: str
    toggle_label: str


def build_current_view(
    location: Location,
    forecast: ForecastPayload,
    unit: DisplayUnit,
) -> CurrentConditionsView:
    condition = classify_weather_code(forecast.current_weather_code)
    temp = format_temperature(forecast.current_temperature_c, unit)
    return CurrentConditionsView(
        location=location.label,
        description=condition.label,
        icon=condition.icon,
        temperature=temp,
        feels_like=temp,
        humidity=HUMIDITY_PLACEHOLDER,
        wind=f"{forecast.current_wind_speed:g} {WIND_SUFFIX}",
        toggle_label=toggle_label(unit),
    )


def build_hourly_chart_data(
    forecast: ForecastPayload,
    unit: DisplayUnit,
    points: int = HOURLY_POINTS,
) -> dict[str, Any]:
    """
    Next `points` hours for the line chart.

    Returns:
    {
        "labels": ["0:00", "1:00", ...],
        "values": [float, ...],
        "series": "Temperature (°F)",
        "unit": "°F",
    }
    Fewer than `points` entries in the payload simply give a shorter series.
    """
    stamps = pd.DatetimeIndex(list(forecast.hourly.timestamps[:points]))
    temps = forecast.hourly.temperatures_c[:points]

    return {
        "labels": [f"{hour}:00" for hour in stamps.hour],
        "values": [convert_temperature(t, unit) for t in temps],
        "series": f"Temperature ({unit.glyph})",
        "unit": unit.glyph,
    }


def build_daily_chart_data(
    forecast: ForecastPayload,
    unit: DisplayUnit,
    points: int = DAILY_POINTS,
) -> dict[str, Any]:
    """
    Next `points` days for the min/max bar chart.

    Returns:
    {
        "labels": ["Mon", "Tue", ...],
        "min_values": [...],
        "max_values": [...],
        "min_series": "Min (°F)",
        "max_series": "Max (°F)",
        "unit": "°F",
    }
    """
    days = pd.DatetimeIndex(pd.to_datetime(list(forecast.daily.dates[:points])))
    mins = forecast.daily.min_temperatures_c[:points]
    maxs = forecast.daily.max_temperatures_c[:points]

    return {
        "labels": list(days.strftime("%a")),
        "min_values": [convert_temperature(t, unit) for t in mins],
        "max_values": [convert_temperature(t, unit) for t in maxs],
        "min_series": f"Min ({unit.glyph})",
        "max_series": f"Max ({unit.glyph})",
        "unit": unit.glyph,
    }

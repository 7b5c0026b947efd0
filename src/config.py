"""Configuration settings for the weather dashboard."""

import os

# ------------------- COLLABORATOR ENDPOINTS -------------------

GEO_URL: str = os.environ.get("WEATHER_GEO_URL", "https://geocoding-api.open-meteo.com/v1/search")
"""Open-Meteo geocoding endpoint (city name → coordinates)."""

WEATHER_URL: str = os.environ.get("WEATHER_API_URL", "https://api.open-meteo.com/v1/forecast")
"""Open-Meteo forecast endpoint (current, hourly and daily data)."""

HTTP_TIMEOUT_S: float = float(os.environ.get("WEATHER_HTTP_TIMEOUT_S", "8.0"))
HTTP_USER_AGENT: str = "WeatherDash/1.0"

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- UNITS AND LABELS -------------------

DEFAULT_UNIT: str = os.environ.get("WEATHER_DEFAULT_UNIT", "F").strip().upper()
"""Unit shown on first load ("F" or "C")."""

DEVICE_LOCATION_LABEL: str = "Your Location"
UNKNOWN_CITY_LABEL: str = "Unknown City"

HUMIDITY_PLACEHOLDER: str = "Live"
"""Open-Meteo's free current_weather block has no humidity."""

WIND_SUFFIX: str = "m/s"

# ------------------- CHARTS -------------------

HOURLY_POINTS: int = 24
DAILY_POINTS: int = 7

# Charts stretch to the column width; Streamlit gives Python no container
# width, so the height stays fixed instead of following an aspect ratio.
HOURLY_CHART_HEIGHT: int = 260
DAILY_CHART_HEIGHT: int = 260

COLOR_LINE: str = "#4aa3ff"
COLOR_MIN: str = "#5cb8ff"
COLOR_MAX: str = "#ff8a5c"
COLOR_TEXT_GRAY: str = "#d0d0d0"

PLOTLY_CONFIG: dict = {
    "displayModeBar": False,
    "responsive": True,
}

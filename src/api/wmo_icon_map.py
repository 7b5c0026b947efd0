from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class WeatherCondition:
    icon: str
    label: str


UNKNOWN: Final[WeatherCondition] = WeatherCondition("❓", "Unknown")

# (low, high, condition); first match wins, so "≤ 2" only catches 1–2 after 0
_CONDITION_RANGES: Final[tuple[tuple[int, int | None, WeatherCondition], ...]] = (
    (0, 0, WeatherCondition("☀️", "Clear Sky")),
    (1, 2, WeatherCondition("⛅", "Partly Cloudy")),
    (3, 3, WeatherCondition("☁️", "Overcast")),
    (45, 48, WeatherCondition("🌫", "Fog")),
    (51, 57, WeatherCondition("🌦", "Drizzle")),
    (61, 67, WeatherCondition("🌧", "Rain")),
    (71, 77, WeatherCondition("❄️", "Snow")),
    (80, 82, WeatherCondition("🌦", "Showers")),
    (95, None, WeatherCondition("⛈", "Thunderstorm")),
)


def classify_weather_code(code: int | None) -> WeatherCondition:
    """
    WMO weathercode → icon + readable label.
    """
    if code is None:
        return UNKNOWN

    for low, high, condition in _CONDITION_RANGES:
        if code >= low and (high is None or code <= high):
            return condition

    return UNKNOWN

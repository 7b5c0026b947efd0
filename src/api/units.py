from __future__ import annotations

import math
from enum import Enum


class DisplayUnit(Enum):
    """Temperature unit used for display. Data on the wire is always Celsius."""

    FAHRENHEIT = "F"
    CELSIUS = "C"

    @property
    def glyph(self) -> str:
        return f"°{self.value}"

    @property
    def other(self) -> DisplayUnit:
        return DisplayUnit.CELSIUS if self is DisplayUnit.FAHRENHEIT else DisplayUnit.FAHRENHEIT

    @classmethod
    def parse(cls, raw: str | None, default: DisplayUnit | None = None) -> DisplayUnit:
        """'F' / 'c' / '°C' → DisplayUnit; unknown values give the default (Fahrenheit)."""
        norm = (raw or "").strip().upper().lstrip("°")
        for unit in cls:
            if unit.value == norm:
                return unit
        return default or cls.FAHRENHEIT


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9 / 5 + 32


def convert_temperature(temp_c: float, unit: DisplayUnit) -> float:
    if unit is DisplayUnit.FAHRENHEIT:
        return celsius_to_fahrenheit(temp_c)
    return float(temp_c)


def _round_half_away(value: float) -> int:
    # Python's round() is banker's rounding: round(0.5) == 0
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_temperature(temp_c: float, unit: DisplayUnit) -> str:
    """Convert, round to a whole degree and append the unit glyph, e.g. '68 °F'."""
    return f"{_round_half_away(convert_temperature(temp_c, unit))} {unit.glyph}"


def toggle_label(unit: DisplayUnit) -> str:
    """Label for the unit switch: shows the current unit and the switch target."""
    return f"{unit.glyph} → {unit.other.glyph}"

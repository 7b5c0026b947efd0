# tests/test_weather_fetch.py
from __future__ import annotations

from datetime import date, datetime

import pytest

import src.api.weather_fetch as wf
from conftest import make_raw_forecast
from src.api.errors import FetchError


def test_fetch_forecast_happy_path(monkeypatch):
    calls = {}

    def fake_get(url, params=None):
        calls["url"] = url
        calls["params"] = params
        return make_raw_forecast()

    monkeypatch.setattr(wf, "http_get_json", fake_get)

    out = wf.fetch_forecast(48.85, 2.35)

    assert calls["url"] == wf.WEATHER_URL
    params = calls["params"]
    assert params["latitude"] == 48.85
    assert params["longitude"] == 2.35
    assert params["current_weather"] == "true"
    assert params["hourly"] == "temperature_2m"
    assert params["daily"] == "temperature_2m_min,temperature_2m_max"
    assert params["timezone"] == "auto"

    assert out.current_temperature_c == 20.0
    assert out.current_wind_speed == 12.5
    assert out.current_weather_code == 61
    assert len(out.hourly.timestamps) == len(out.hourly.temperatures_c) == 30
    assert out.hourly.timestamps[0] == datetime(2025, 6, 2, 0, 0)
    assert out.daily.dates[0] == date(2025, 6, 2)
    assert out.daily.max_temperatures_c[6] == 21.0


def test_fetch_forecast_propagates_fetch_error(monkeypatch):
    def boom(url, params=None):
        raise FetchError()

    monkeypatch.setattr(wf, "http_get_json", boom)

    with pytest.raises(FetchError):
        wf.fetch_forecast(0.0, 0.0)


def test_parse_forecast_accepts_current_block():
    raw = make_raw_forecast()
    raw["current"] = raw.pop("current_weather")

    out = wf.parse_forecast(raw)

    assert out.current_temperature_c == 20.0


@pytest.mark.parametrize("block", ["current_weather", "hourly", "daily"])
def test_parse_forecast_missing_block(block):
    raw = make_raw_forecast()
    del raw[block]

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)


def test_parse_forecast_missing_current_field():
    raw = make_raw_forecast()
    del raw["current_weather"]["weathercode"]

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)


def test_parse_forecast_hourly_length_mismatch():
    raw = make_raw_forecast()
    raw["hourly"]["temperature_2m"].pop()

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)


def test_parse_forecast_daily_length_mismatch():
    raw = make_raw_forecast()
    raw["daily"]["temperature_2m_max"].append(30.0)

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)


def test_parse_forecast_bad_values():
    raw = make_raw_forecast()
    raw["hourly"]["temperature_2m"][3] = None

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), "inf", "nan"])
def test_parse_forecast_rejects_non_finite_current_temperature(value):
    raw = make_raw_forecast()
    raw["current_weather"]["temperature"] = value

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)


def test_parse_forecast_rejects_non_finite_series_value():
    raw = make_raw_forecast()
    raw["daily"]["temperature_2m_max"][2] = float("inf")

    with pytest.raises(FetchError):
        wf.parse_forecast(raw)

# tests/test_wmo_icon_map.py
import src.api.wmo_icon_map as w


def test_classify_weather_code_known_codes():
    assert w.classify_weather_code(0).label == "Clear Sky"
    assert w.classify_weather_code(2).label == "Partly Cloudy"
    assert w.classify_weather_code(3).label == "Overcast"
    assert w.classify_weather_code(48).label == "Fog"
    assert w.classify_weather_code(55).label == "Drizzle"
    assert w.classify_weather_code(61).label == "Rain"
    assert w.classify_weather_code(75).label == "Snow"
    assert w.classify_weather_code(81).label == "Showers"
    assert w.classify_weather_code(99).label == "Thunderstorm"


def test_classify_weather_code_carries_icon():
    assert w.classify_weather_code(0).icon == "☀️"
    assert w.classify_weather_code(95).icon == "⛈"


def test_classify_weather_code_gaps_are_unknown():
    for code in (4, 13, 50, 60, 70, 78, 85, 94):
        assert w.classify_weather_code(code) == w.UNKNOWN


def test_classify_weather_code_none_and_negative_are_unknown():
    assert w.classify_weather_code(None).label == "Unknown"
    assert w.classify_weather_code(-1).label == "Unknown"

from .errors import (
    DashboardError as DashboardError,
    FetchError as FetchError,
    LocationPermissionError as LocationPermissionError,
    NotFoundError as NotFoundError,
    ValidationError as ValidationError,
)
from .geocoding import Location as Location, device_location as device_location, resolve_city as resolve_city
from .units import (
    DisplayUnit as DisplayUnit,
    celsius_to_fahrenheit as celsius_to_fahrenheit,
    format_temperature as format_temperature,
)
from .weather_fetch import ForecastPayload as ForecastPayload, fetch_forecast as fetch_forecast
from .wmo_icon_map import classify_weather_code as classify_weather_code

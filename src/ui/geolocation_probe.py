from __future__ import annotations

from streamlit.components.v1 import declare_component

from src.api.geolocation import GeolocationResult, read_geolocation_value, read_support_value
from src.paths import asset_path

MODE_SUPPORT = "support"
MODE_LOCATE = "locate"

SUPPORT_KEY = "geo-support"

# Static frontend; it answers through Streamlit's component value channel.
_component_func = declare_component("geolocation", path=str(asset_path("geolocation")))


def geolocation_support() -> bool | None:
    """Whether the browser has a geolocation API. None until it has answered."""
    value = _component_func(mode=MODE_SUPPORT, key=SUPPORT_KEY, default=None)
    return read_support_value(value)


def geolocation_probe(attempt: int) -> GeolocationResult | None:
    """
    Ask the browser for one position. None until it has answered.

    Each attempt gets its own component key, so a new click starts from an
    empty value instead of replaying the previous answer.
    """
    value = _component_func(mode=MODE_LOCATE, key=f"geo-probe-{attempt}", default=None)
    return read_geolocation_value(value)

"""Expose dashboard card render functions."""

from .card_current import card_current, card_current_empty
from .card_daily import card_daily
from .card_hourly import card_hourly
from .card_search import card_search
from .charts import ChartMount

__all__ = [
    "ChartMount",
    "card_current",
    "card_current_empty",
    "card_daily",
    "card_hourly",
    "card_search",
]

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

import pandas as pd


def _normalize_scalar(value: Any) -> Any | None:
    """
    Common preprocessing for the different source types:
    - None → None
    - pandas NA / NaN → None
    - numpy scalar etc. → .item()
    """
    if value is None:
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # pd.isna on list-likes returns an array; leave those to the caster
        pass

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


def _cast_to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    # NaN and ±inf are not readings
    return f if math.isfinite(f) else None


def _cast_to_int(value: Any) -> int | None:
    f = _cast_to_float(value)
    if f is None:
        return None
    return int(f)


def as_float(x: Any) -> float | None:
    """Best-effort float, None when the value has no sensible numeric reading."""
    value = _normalize_scalar(x)
    if value is None:
        return None
    return _cast_to_float(value)


def as_int(x: Any) -> int | None:
    value = _normalize_scalar(x)
    if value is None:
        return None
    return _cast_to_int(value)


def float_series(values: Sequence[Any]) -> tuple[float, ...] | None:
    """Whole series or nothing: a single bad value makes the series unusable."""
    out: list[float] = []
    for v in values:
        f = as_float(v)
        if f is None:
            return None
        out.append(f)
    return tuple(out)


def datetime_series(values: Sequence[Any]) -> tuple[datetime, ...] | None:
    """Parse Open-Meteo local timestamps ('2025-11-11T10:00')."""
    try:
        parsed = pd.to_datetime(list(values), format="ISO8601")
    except (TypeError, ValueError):
        return None
    if parsed.isna().any():
        return None
    return tuple(ts.to_pydatetime() for ts in parsed)


def date_series(values: Sequence[Any]) -> tuple[date, ...] | None:
    stamps = datetime_series(values)
    if stamps is None:
        return None
    return tuple(ts.date() for ts in stamps)

from __future__ import annotations

import datetime as dt
from typing import Union

import pandas as pd

from dateseq.exceptions import InvalidConfiguration
from dateseq.types import Weekday

DateLike = Union[str, dt.date, dt.datetime, pd.Timestamp]


def to_day(value: DateLike) -> pd.Timestamp:
    """Normalise a date-like value to a tz-naive midnight Timestamp.

    Timezone-aware values are converted to their local wall-clock date.

    Raises:
        InvalidConfiguration: If the value cannot be read as a date
    """
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"Cannot interpret {value!r} as a date") from e

    if pd.isna(ts):
        raise InvalidConfiguration(f"Cannot interpret {value!r} as a date")

    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def days(n: int) -> pd.Timedelta:
    """A span of ``n`` calendar days, e.g. ``start + days(3)``."""
    return pd.Timedelta(days=n)


def add_days(date: pd.Timestamp, n: int) -> pd.Timestamp:
    return date + days(n)


def weekday_of(date: pd.Timestamp) -> Weekday:
    return Weekday(date.weekday())


def format_day(date: pd.Timestamp) -> str:
    """Render a date as 'YYYY-MM-DD Weekday'."""
    return f"{date.strftime('%Y-%m-%d')} {weekday_of(date).label}"

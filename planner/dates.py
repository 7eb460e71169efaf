# planner/dates.py
from datetime import date, datetime
from typing import Optional, Union

import pandas as pd

ISO_FORMAT = "%Y-%m-%d"

DateLike = Union[str, date, datetime, pd.Timestamp]


def _to_timestamp(value: DateLike) -> pd.Timestamp:
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (date, datetime, pd.Timestamp)):
        raise ValueError(f"Unsupported date value: {value!r}")
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Unsupported date value: {value!r}")
    return ts


def to_iso(value: DateLike) -> str:
    """
    Normalise a date to zero-padded YYYY-MM-DD.

    Buckets are ordered by comparing these strings, which is only
    chronological when every date has the same fixed-width form.
    Strings pandas cannot parse raise ValueError.
    """
    return _to_timestamp(value).strftime(ISO_FORMAT)


def add_days(value: DateLike, days: int) -> str:
    return (_to_timestamp(value).normalize() + pd.Timedelta(days=days)).strftime(ISO_FORMAT)


def today(tz: Optional[str] = None) -> str:
    return pd.Timestamp.now(tz=tz).strftime(ISO_FORMAT)

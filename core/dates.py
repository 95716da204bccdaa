"""Timestamp coercion and day arithmetic shared by the loader and analytics."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

import pandas as pd

from core.errors import InvalidDataError

__all__ = ["ONE_DAY", "DateLike", "to_timestamp", "days_between"]

ONE_DAY = pd.Timedelta(days=1)

DateLike = Union[str, date, datetime, pd.Timestamp]


def to_timestamp(value: DateLike, *, field: str = "date") -> pd.Timestamp:
    """Return ``value`` as a naive ``pd.Timestamp``.

    Timezone-aware values are converted to UTC first so every timestamp in a
    run shares the same clock.
    """

    if isinstance(value, bool) or not isinstance(value, (str, date, datetime, pd.Timestamp)):
        raise InvalidDataError(f"{field} must be a date string, got {value!r}")
    if isinstance(value, str) and not value.strip():
        raise InvalidDataError(f"{field} must not be empty")

    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError) as exc:
        raise InvalidDataError(f"{field} is not a valid date: {value!r}") from exc

    if pd.isna(ts):
        raise InvalidDataError(f"{field} is not a valid date: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def days_between(start: pd.Timestamp, end: pd.Timestamp) -> float:
    """Real-valued number of days from ``start`` to ``end`` (negative if ``end`` is earlier)."""

    return float((end - start) / ONE_DAY)

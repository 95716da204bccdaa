"""Calendar timeline generation for the burndown x-axis."""

from __future__ import annotations

import pandas as pd

from core.dates import days_between
from core.errors import InvalidRangeError
from core.models import TimelinePoint

__all__ = ["build_timeline", "timeline_duration_days"]


def build_timeline(start_date: pd.Timestamp, end_date: pd.Timestamp) -> list[TimelinePoint]:
    """Return one ``TimelinePoint`` per calendar day from ``start_date`` through ``end_date``.

    Days are generated by calendar stepping (``freq="D"`` on naive timestamps),
    so the sequence never drifts across daylight-saving transitions. Both ends
    are inclusive; an ``end_date`` with a time component includes every day
    whose start falls on or before it.
    """

    if end_date < start_date:
        raise InvalidRangeError(
            f"End date {end_date.date().isoformat()} precedes start date {start_date.date().isoformat()}"
        )

    days = pd.date_range(start_date, end_date, freq="D")
    return [
        TimelinePoint(day_offset=offset, calendar_date=day.date())
        for offset, day in enumerate(days)
    ]


def timeline_duration_days(start_date: pd.Timestamp, end_date: pd.Timestamp) -> float:
    """Elapsed days between the timeline ends; the divisor of the ideal burn rate."""

    if end_date < start_date:
        raise InvalidRangeError(
            f"End date {end_date.date().isoformat()} precedes start date {start_date.date().isoformat()}"
        )
    return days_between(start_date, end_date)

"""Ideal and actual remaining-effort series for the burndown chart."""

from __future__ import annotations

import logging
import warnings
from typing import Iterable, Sequence, Tuple

import numpy as np
import pandas as pd

from core.dates import ONE_DAY
from core.errors import DegenerateTimelineError
from core.models import BurndownData, SeriesPoint, Task, TimelinePoint

__all__ = [
    "compute_daily_burn_rate",
    "build_ideal_series",
    "build_actual_series",
    "build_series_frames",
]

logger = logging.getLogger(__name__)


def compute_daily_burn_rate(total_scope: float, duration_days: float) -> float:
    """Return scope burned per elapsed day.

    A zero-length timeline has no meaningful rate; the whole scope is burned
    in a single day instead of dividing by zero.
    """

    if duration_days == 0:
        return float(total_scope)
    return float(total_scope) / duration_days


def build_ideal_series(
    total_scope: float,
    timeline: Sequence[TimelinePoint],
    duration_days: float,
) -> list[SeriesPoint]:
    """Linear work-down with one point per timeline day, clamped at zero.

    The divisor is the elapsed span in days, not the number of timeline
    points. On a zero-length timeline each day is evaluated one step ahead so
    the lone day-0 point already reads zero.
    """

    daily_burn_rate = compute_daily_burn_rate(total_scope, duration_days)
    steps = np.arange(len(timeline), dtype=float)
    if duration_days == 0:
        warnings.warn(
            "Start date equals end date; ideal burndown drops to zero on day 0",
            DegenerateTimelineError,
            stacklevel=2,
        )
        steps = steps + 1.0

    remaining = np.maximum(float(total_scope) - daily_burn_rate * steps, 0.0)
    return [
        SeriesPoint(x=float(point.day_offset), y=float(value))
        for point, value in zip(timeline, remaining)
    ]


def build_actual_series(
    tasks: Iterable[Task],
    total_scope: float,
    start_date: pd.Timestamp,
) -> list[SeriesPoint]:
    """Replay task completions into the remaining-effort curve.

    Every completed task yields one point at its real-valued day offset. Its
    ``y`` is the scope left after subtracting the task itself and every task
    finished strictly earlier. Tasks sharing a timestamp never count each
    other, so same-day completions produce several points at one ``x`` rather
    than a running cumulative sum. Completions before ``start_date`` keep their
    negative offset. The series always opens with ``(0, total_scope)``.
    """

    anchor = SeriesPoint(x=0.0, y=float(total_scope))
    completed = [task for task in tasks if task.is_complete]
    if not completed:
        return [anchor]

    frame = pd.DataFrame(
        {
            "completed_at": [task.completed_at for task in completed],
            "points": [float(task.points) for task in completed],
        }
    )

    # Points per distinct timestamp; shifting the running total leaves only
    # groups that finished strictly earlier.
    group_totals = frame.groupby("completed_at", sort=True)["points"].sum()
    finished_before = group_totals.cumsum().shift(1, fill_value=0.0)

    frame["finished_before"] = frame["completed_at"].map(finished_before).astype(float)
    frame["x"] = (frame["completed_at"] - start_date) / ONE_DAY
    frame["y"] = np.maximum(float(total_scope) - frame["finished_before"] - frame["points"], 0.0)
    frame = frame.sort_values("x", kind="stable")

    logger.debug("Actual series built from %d completed tasks", len(frame))
    return [anchor] + [
        SeriesPoint(x=float(x), y=float(y)) for x, y in zip(frame["x"], frame["y"])
    ]


def build_series_frames(data: BurndownData) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return data frames for the ideal and actual series."""

    ideal_records: list[dict[str, object]] = []
    for timeline_point, point in zip(data["timeline"], data["ideal_series"]):
        ideal_records.append(
            {
                "Day": point.x,
                "Date": timeline_point.calendar_date.isoformat(),
                "Remaining": point.y,
                "Series": "Ideal",
            }
        )

    actual_records = [
        {"Day": point.x, "Remaining": point.y, "Series": "Actual"}
        for point in data["actual_series"]
    ]

    ideal_df = pd.DataFrame(ideal_records, columns=["Day", "Date", "Remaining", "Series"])
    actual_df = pd.DataFrame(actual_records, columns=["Day", "Remaining", "Series"])
    return ideal_df, actual_df

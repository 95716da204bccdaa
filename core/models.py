"""Shared data model definitions for the burndown pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TypedDict

import pandas as pd


@dataclass(frozen=True)
class Task:
    points: float
    completed_at: pd.Timestamp | None = None
    task_id: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.completed_at is not None


@dataclass(frozen=True)
class Milestone:
    name: str
    date: pd.Timestamp


@dataclass(frozen=True)
class ProjectData:
    """Root input of the pipeline; read-only for the whole run."""

    start_date: pd.Timestamp
    tasks: tuple[Task, ...]
    milestones: tuple[Milestone, ...]

    @property
    def end_date(self) -> pd.Timestamp:
        """Date of the last milestone in list order (not the latest date)."""

        return self.milestones[-1].date


@dataclass(frozen=True)
class TimelinePoint:
    day_offset: int
    calendar_date: date


@dataclass(frozen=True)
class SeriesPoint:
    x: float
    y: float


@dataclass(frozen=True)
class MilestoneAnnotation:
    label: str
    day_offset: int


@dataclass(frozen=True)
class MilestoneMarker:
    """Pixel placement of a milestone label and its tick mark."""

    label: str
    x_pixel: float
    axis_pixel: float
    tick_end_pixel: float
    label_pixel: float


class BurndownData(TypedDict):
    start_date: pd.Timestamp
    end_date: pd.Timestamp
    total_scope: float
    duration_days: float
    daily_burn_rate: float
    timeline: list[TimelinePoint]
    ideal_series: list[SeriesPoint]
    actual_series: list[SeriesPoint]
    milestones: list[MilestoneAnnotation]


__all__ = [
    "Task",
    "Milestone",
    "ProjectData",
    "TimelinePoint",
    "SeriesPoint",
    "MilestoneAnnotation",
    "MilestoneMarker",
    "BurndownData",
]

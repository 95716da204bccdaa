"""Core domain package for the burndown chart generator."""

from .data_loader import load_project, parse_project
from .errors import BurndownError, DegenerateTimelineError, InvalidDataError, InvalidRangeError
from .models import (
    BurndownData,
    Milestone,
    MilestoneAnnotation,
    MilestoneMarker,
    ProjectData,
    SeriesPoint,
    Task,
    TimelinePoint,
)

__all__ = [
    "BurndownData",
    "Milestone",
    "MilestoneAnnotation",
    "MilestoneMarker",
    "ProjectData",
    "SeriesPoint",
    "Task",
    "TimelinePoint",
    "BurndownError",
    "DegenerateTimelineError",
    "InvalidDataError",
    "InvalidRangeError",
    "load_project",
    "parse_project",
]

"""Burndown analytics: timeline, scope, series and milestone placement."""

from analytics.milestones import (
    annotate_milestones,
    place_milestone_markers,
    round_half_away_from_zero,
)
from analytics.scope import compute_total_scope
from analytics.series import (
    build_actual_series,
    build_ideal_series,
    build_series_frames,
    compute_daily_burn_rate,
)
from analytics.timeline import build_timeline, timeline_duration_days

__all__ = [
    "annotate_milestones",
    "place_milestone_markers",
    "round_half_away_from_zero",
    "compute_total_scope",
    "build_actual_series",
    "build_ideal_series",
    "build_series_frames",
    "compute_daily_burn_rate",
    "build_timeline",
    "timeline_duration_days",
]

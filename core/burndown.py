"""Pipeline entry point: project data in, renderer-ready burndown data out."""

from __future__ import annotations

import logging
from pathlib import Path

from analytics.milestones import annotate_milestones
from analytics.scope import compute_total_scope
from analytics.series import build_actual_series, build_ideal_series, compute_daily_burn_rate
from analytics.timeline import build_timeline, timeline_duration_days
from core.data_loader import load_project
from core.models import BurndownData, ProjectData

__all__ = ["build_burndown", "prepare_burndown_data"]

logger = logging.getLogger(__name__)


def build_burndown(project: ProjectData) -> BurndownData:
    """Compute the timeline, both series and the milestone offsets for ``project``.

    Pure and deterministic: the same project always yields identical output.
    Completions and milestones outside the timeline are kept and only logged.
    """

    start_date = project.start_date
    end_date = project.end_date

    timeline = build_timeline(start_date, end_date)
    duration_days = timeline_duration_days(start_date, end_date)
    total_scope = compute_total_scope(project.tasks)

    ideal_series = build_ideal_series(total_scope, timeline, duration_days)
    actual_series = build_actual_series(project.tasks, total_scope, start_date)
    milestones = annotate_milestones(project.milestones, start_date)

    _log_anomalies(project)
    logger.debug(
        "Burndown built: scope=%s, %d timeline days, %d actual points",
        total_scope,
        len(timeline),
        len(actual_series),
    )

    return {
        "start_date": start_date,
        "end_date": end_date,
        "total_scope": total_scope,
        "duration_days": duration_days,
        "daily_burn_rate": compute_daily_burn_rate(total_scope, duration_days),
        "timeline": timeline,
        "ideal_series": ideal_series,
        "actual_series": actual_series,
        "milestones": milestones,
    }


def prepare_burndown_data(json_path: str | Path) -> BurndownData:
    """Load the project file at ``json_path`` and build its burndown data."""

    return build_burndown(load_project(json_path))


def _log_anomalies(project: ProjectData) -> None:
    start_date = project.start_date
    end_date = project.end_date

    for index, task in enumerate(project.tasks):
        if not task.is_complete:
            continue
        if task.completed_at < start_date:
            logger.warning(
                "tasks[%d] completed on %s, before the project start %s",
                index,
                task.completed_at.date().isoformat(),
                start_date.date().isoformat(),
            )
        elif task.completed_at > end_date:
            logger.warning(
                "tasks[%d] completed on %s, after the project end %s",
                index,
                task.completed_at.date().isoformat(),
                end_date.date().isoformat(),
            )

    for milestone in project.milestones:
        if milestone.date < start_date or milestone.date > end_date:
            logger.warning(
                "Milestone %r on %s falls outside the timeline", milestone.name, milestone.date.date().isoformat()
            )

"""Loading and structural validation of project JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from core.dates import to_timestamp
from core.errors import InvalidDataError
from core.models import Milestone, ProjectData, Task
from core.points import coerce_points

__all__ = ["parse_project", "load_project"]

logger = logging.getLogger(__name__)


def _require(mapping: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in mapping or mapping[key] is None:
        raise InvalidDataError(f"{where} is missing required field '{key}'")
    return mapping[key]


def _parse_task(raw: Any, index: int) -> Task:
    where = f"tasks[{index}]"
    if not isinstance(raw, Mapping):
        raise InvalidDataError(f"{where} must be an object")

    points = coerce_points(_require(raw, "points", where), field=f"{where}.points")
    completed_raw = raw.get("completedAt")
    completed_at = None
    if completed_raw not in (None, ""):
        completed_at = to_timestamp(completed_raw, field=f"{where}.completedAt")

    task_id = raw.get("id")
    return Task(
        points=points,
        completed_at=completed_at,
        task_id=str(task_id) if task_id is not None else None,
    )


def _parse_milestone(raw: Any, index: int) -> Milestone:
    where = f"milestones[{index}]"
    if not isinstance(raw, Mapping):
        raise InvalidDataError(f"{where} must be an object")

    name = _require(raw, "name", where)
    if not isinstance(name, str):
        raise InvalidDataError(f"{where}.name must be a string, got {name!r}")
    return Milestone(name=name, date=to_timestamp(_require(raw, "date", where), field=f"{where}.date"))


def parse_project(payload: Any) -> ProjectData:
    """Validate a decoded JSON payload and build the immutable ``ProjectData``."""

    if not isinstance(payload, Mapping):
        raise InvalidDataError("Project data must be a JSON object")

    start_date = to_timestamp(_require(payload, "startDate", "project"), field="startDate")

    raw_tasks = _require(payload, "tasks", "project")
    if not isinstance(raw_tasks, list):
        raise InvalidDataError("tasks must be a list")
    raw_milestones = _require(payload, "milestones", "project")
    if not isinstance(raw_milestones, list):
        raise InvalidDataError("milestones must be a list")
    if not raw_milestones:
        raise InvalidDataError("At least one milestone is required to define the end date")

    tasks = tuple(_parse_task(raw, i) for i, raw in enumerate(raw_tasks))
    milestones = tuple(_parse_milestone(raw, i) for i, raw in enumerate(raw_milestones))
    return ProjectData(start_date=start_date, tasks=tasks, milestones=milestones)


def load_project(json_path: str | Path) -> ProjectData:
    """Read and validate the project JSON file at ``json_path``."""

    path = Path(json_path)
    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidDataError(f"{path} is not valid JSON: {exc}") from exc

    project = parse_project(payload)
    logger.debug(
        "Loaded %s: %d tasks, %d milestones", path, len(project.tasks), len(project.milestones)
    )
    return project

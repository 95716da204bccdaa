"""Tests for project loading and the end-to-end burndown pipeline."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core import DegenerateTimelineError, InvalidDataError, InvalidRangeError, load_project, parse_project
from core.burndown import build_burndown, prepare_burndown_data
from core.models import MilestoneAnnotation, SeriesPoint


@pytest.fixture()
def sample_payload() -> dict:
    return {
        "startDate": "2024-01-01",
        "tasks": [
            {"id": "T-1", "points": 3, "completedAt": "2024-01-02"},
            {"points": 5, "completedAt": "2024-01-04"},
            {"points": 2, "completedAt": "2024-01-04"},
            {"points": 8},
            {"points": 2, "completedAt": None},
        ],
        "milestones": [
            {"name": "Design", "date": "2024-01-03"},
            {"name": "Build", "date": "2024-01-07"},
            {"name": "Ship", "date": "2024-01-11"},
        ],
    }


@pytest.fixture()
def sample_project_file(sample_payload, tmp_path) -> Path:
    path = tmp_path / "project.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


def test_parse_project_builds_immutable_model(sample_payload):
    project = parse_project(sample_payload)

    assert project.start_date == pd.Timestamp("2024-01-01")
    assert len(project.tasks) == 5
    assert project.tasks[0].task_id == "T-1"
    assert project.tasks[0].completed_at == pd.Timestamp("2024-01-02")
    assert project.tasks[0].is_complete
    assert project.tasks[3].completed_at is None
    assert not project.tasks[3].is_complete
    assert project.tasks[4].completed_at is None
    assert project.end_date == pd.Timestamp("2024-01-11")


def test_parse_project_normalises_timezone_aware_dates(sample_payload):
    sample_payload["tasks"][0]["completedAt"] = "2024-01-02T10:00:00+02:00"

    project = parse_project(sample_payload)

    assert project.tasks[0].completed_at == pd.Timestamp("2024-01-02T08:00:00")


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p["tasks"][0].update(points=-1),
        lambda p: p["tasks"][0].update(points="3"),
        lambda p: p["tasks"][0].update(points=True),
        lambda p: p["tasks"][0].pop("points"),
        lambda p: p["tasks"][0].update(completedAt="not-a-date"),
        lambda p: p["milestones"][0].update(date="someday"),
        lambda p: p["milestones"][0].update(name=42),
        lambda p: p.pop("startDate"),
        lambda p: p.update(tasks={"points": 1}),
        lambda p: p.update(milestones=[]),
        lambda p: p["tasks"].append("T-9"),
    ],
)
def test_parse_project_rejects_malformed_input(sample_payload, mutate):
    mutate(sample_payload)

    with pytest.raises(InvalidDataError):
        parse_project(sample_payload)


def test_parse_project_rejects_non_object():
    with pytest.raises(InvalidDataError):
        parse_project([1, 2, 3])


def test_load_project_reads_json_file(sample_project_file):
    project = load_project(sample_project_file)

    assert len(project.milestones) == 3


def test_load_project_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_project(tmp_path / "missing.json")


def test_load_project_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidDataError):
        load_project(path)


def test_build_burndown_end_to_end(sample_project_file):
    data = prepare_burndown_data(sample_project_file)

    assert data["total_scope"] == pytest.approx(20.0)
    assert data["duration_days"] == pytest.approx(10.0)
    assert data["daily_burn_rate"] == pytest.approx(2.0)
    assert len(data["timeline"]) == 11
    assert len(data["ideal_series"]) == 11
    assert data["ideal_series"][0] == SeriesPoint(x=0.0, y=20.0)
    assert data["ideal_series"][-1].y == pytest.approx(0.0)
    assert data["actual_series"] == [
        SeriesPoint(x=0.0, y=20.0),
        SeriesPoint(x=1.0, y=17.0),
        SeriesPoint(x=3.0, y=12.0),
        SeriesPoint(x=3.0, y=15.0),
    ]
    assert data["milestones"] == [
        MilestoneAnnotation(label="Design", day_offset=2),
        MilestoneAnnotation(label="Build", day_offset=6),
        MilestoneAnnotation(label="Ship", day_offset=10),
    ]


def test_build_burndown_is_idempotent(sample_payload):
    project = parse_project(sample_payload)

    assert build_burndown(project) == build_burndown(project)


def test_build_burndown_ideal_series_properties(sample_payload):
    data = build_burndown(parse_project(sample_payload))

    ys = [point.y for point in data["ideal_series"]]
    n = len(data["timeline"])
    assert ys[-1] == pytest.approx(max(0.0, data["total_scope"] - data["daily_burn_rate"] * (n - 1)))
    assert all(earlier >= later for earlier, later in zip(ys, ys[1:]))
    assert data["actual_series"][0] == SeriesPoint(x=0.0, y=data["total_scope"])


def test_scenario_single_incomplete_task():
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": [{"points": 10}],
            "milestones": [{"name": "Done", "date": "2024-01-06"}],
        }
    )

    data = build_burndown(project)

    assert data["actual_series"] == [SeriesPoint(x=0.0, y=10.0)]
    assert [point.y for point in data["ideal_series"]] == pytest.approx(
        [max(0.0, 10 - 2 * i) for i in range(6)]
    )


def test_scenario_two_tasks_same_day():
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": [
                {"points": 5, "completedAt": "2024-01-03"},
                {"points": 5, "completedAt": "2024-01-03"},
            ],
            "milestones": [{"name": "End", "date": "2024-01-05"}],
        }
    )

    data = build_burndown(project)

    assert data["actual_series"][1:] == [SeriesPoint(x=2.0, y=5.0), SeriesPoint(x=2.0, y=5.0)]


def test_scenario_degenerate_duration():
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": [{"points": 4}],
            "milestones": [{"name": "Same day", "date": "2024-01-01"}],
        }
    )

    with pytest.warns(DegenerateTimelineError):
        data = build_burndown(project)

    assert data["ideal_series"] == [SeriesPoint(x=0.0, y=0.0)]
    assert data["daily_burn_rate"] == pytest.approx(4.0)


def test_scenario_negative_points_rejected():
    with pytest.raises(InvalidDataError):
        parse_project(
            {
                "startDate": "2024-01-01",
                "tasks": [{"points": -1}],
                "milestones": [{"name": "End", "date": "2024-01-05"}],
            }
        )


def test_end_date_follows_last_milestone_in_list_order(caplog):
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": [{"points": 4}],
            "milestones": [
                {"name": "Late", "date": "2024-01-10"},
                {"name": "Final", "date": "2024-01-05"},
            ],
        }
    )

    with caplog.at_level(logging.WARNING, logger="core.burndown"):
        data = build_burndown(project)

    assert data["end_date"] == pd.Timestamp("2024-01-05")
    assert len(data["timeline"]) == 5
    assert data["milestones"][0] == MilestoneAnnotation(label="Late", day_offset=9)
    assert "outside the timeline" in caplog.text


def test_end_before_start_raises_invalid_range():
    project = parse_project(
        {
            "startDate": "2024-01-10",
            "tasks": [],
            "milestones": [{"name": "End", "date": "2024-01-05"}],
        }
    )

    with pytest.raises(InvalidRangeError):
        build_burndown(project)


def test_completion_before_start_is_kept_and_logged(caplog):
    project = parse_project(
        {
            "startDate": "2024-01-05",
            "tasks": [{"points": 2, "completedAt": "2024-01-03"}, {"points": 2}],
            "milestones": [{"name": "End", "date": "2024-01-09"}],
        }
    )

    with caplog.at_level(logging.WARNING, logger="core.burndown"):
        data = build_burndown(project)

    assert data["actual_series"][1] == SeriesPoint(x=-2.0, y=2.0)
    assert "before the project start" in caplog.text


def test_completion_after_end_is_kept_and_logged(caplog):
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": [{"points": 3, "completedAt": "2024-01-08"}, {"points": 1}],
            "milestones": [{"name": "End", "date": "2024-01-05"}],
        }
    )

    with caplog.at_level(logging.WARNING, logger="core.burndown"):
        data = build_burndown(project)

    assert data["actual_series"][1] == SeriesPoint(x=7.0, y=1.0)
    assert "after the project end" in caplog.text


def test_milestone_before_start_is_annotated_and_logged(caplog):
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": [{"points": 2}],
            "milestones": [
                {"name": "Kickoff", "date": "2023-12-28"},
                {"name": "End", "date": "2024-01-05"},
            ],
        }
    )

    with caplog.at_level(logging.WARNING, logger="core.burndown"):
        data = build_burndown(project)

    assert data["milestones"][0] == MilestoneAnnotation(label="Kickoff", day_offset=-4)
    assert "'Kickoff'" in caplog.text
    assert "outside the timeline" in caplog.text


def test_points_finished_before_never_decreases_over_time():
    tasks = [
        {"points": 2, "completedAt": "2024-01-05"},
        {"points": 3, "completedAt": "2024-01-02"},
        {"points": 1, "completedAt": "2024-01-05"},
        {"points": 4, "completedAt": "2024-01-03"},
        {"points": 0.5, "completedAt": "2024-01-02"},
        {"points": 7},
    ]
    project = parse_project(
        {
            "startDate": "2024-01-01",
            "tasks": tasks,
            "milestones": [{"name": "End", "date": "2024-01-10"}],
        }
    )

    data = build_burndown(project)

    completed = sorted(
        (task for task in project.tasks if task.is_complete),
        key=lambda task: task.completed_at,
    )
    points_by_x: dict[float, set[float]] = {}
    for task, point in zip(completed, data["actual_series"][1:]):
        finished_before = data["total_scope"] - point.y - task.points
        points_by_x.setdefault(point.x, set()).add(finished_before)

    # Same-timestamp tasks see the same earlier total; later timestamps never see less.
    assert all(len(values) == 1 for values in points_by_x.values())
    totals = [values.pop() for _, values in sorted(points_by_x.items())]
    assert totals == pytest.approx([0.0, 3.5, 7.5])
    assert all(earlier <= later for earlier, later in zip(totals, totals[1:]))
    assert [point.y for point in data["actual_series"]] == pytest.approx([17.5, 14.5, 17.0, 10.0, 8.0, 9.0])

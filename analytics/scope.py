"""Total planned effort across a task ledger."""

from __future__ import annotations

from typing import Iterable

from core.models import Task
from core.points import coerce_points

__all__ = ["compute_total_scope"]


def compute_total_scope(tasks: Iterable[Task]) -> float:
    """Sum task points in input order.

    Raises ``InvalidDataError`` if any task carries negative or non-numeric points.
    """

    total = 0.0
    for index, task in enumerate(tasks):
        total += coerce_points(task.points, field=f"tasks[{index}].points")
    return total

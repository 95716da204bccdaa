"""Milestone overlay placement."""

from __future__ import annotations

import math
from typing import Callable, Iterable

import pandas as pd

from core.dates import days_between
from core.models import Milestone, MilestoneAnnotation, MilestoneMarker

__all__ = [
    "TICK_LENGTH_PX",
    "LABEL_OFFSET_PX",
    "round_half_away_from_zero",
    "annotate_milestones",
    "place_milestone_markers",
]

TICK_LENGTH_PX = 5.0
LABEL_OFFSET_PX = 10.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with .5 moving away from zero (2.5 -> 3, -2.5 -> -3)."""

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def annotate_milestones(
    milestones: Iterable[Milestone],
    start_date: pd.Timestamp,
) -> list[MilestoneAnnotation]:
    """Snap each milestone to a whole-day offset from ``start_date``, keeping list order."""

    return [
        MilestoneAnnotation(
            label=milestone.name,
            day_offset=round_half_away_from_zero(days_between(start_date, milestone.date)),
        )
        for milestone in milestones
    ]


def place_milestone_markers(
    annotations: Iterable[MilestoneAnnotation],
    x_scale: Callable[[float], float],
    axis_pixel: float,
) -> list[MilestoneMarker]:
    """Map annotations to pixel positions below the x-axis baseline.

    ``x_scale`` is the renderer's linear scale (day offset -> pixel) and
    ``axis_pixel`` the vertical pixel of the axis baseline. Pixel rows grow
    downwards: the tick spans ``TICK_LENGTH_PX`` below the baseline and the
    label's top edge sits ``LABEL_OFFSET_PX`` below it.
    """

    markers: list[MilestoneMarker] = []
    for annotation in annotations:
        markers.append(
            MilestoneMarker(
                label=annotation.label,
                x_pixel=float(x_scale(annotation.day_offset)),
                axis_pixel=float(axis_pixel),
                tick_end_pixel=float(axis_pixel) + TICK_LENGTH_PX,
                label_pixel=float(axis_pixel) + LABEL_OFFSET_PX,
            )
        )
    return markers

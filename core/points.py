"""Validation of task point values."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from core.errors import InvalidDataError

__all__ = ["coerce_points"]


def coerce_points(value: Any, *, field: str = "points") -> float:
    """Return ``value`` as a non-negative float or raise ``InvalidDataError``."""

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDataError(f"{field} must be a number, got {value!r}")
    points = float(value)
    if math.isnan(points) or math.isinf(points):
        raise InvalidDataError(f"{field} must be finite, got {value!r}")
    if points < 0:
        raise InvalidDataError(f"{field} must not be negative, got {value!r}")
    return points

"""Error taxonomy for the burndown pipeline."""

from __future__ import annotations

__all__ = [
    "BurndownError",
    "InvalidRangeError",
    "InvalidDataError",
    "DegenerateTimelineError",
]


class BurndownError(Exception):
    """Base class for every error raised by the burndown pipeline."""


class InvalidRangeError(BurndownError, ValueError):
    """Raised when a timeline ends before it starts."""


class InvalidDataError(BurndownError, ValueError):
    """Raised for malformed project data: missing fields, bad dates, negative points."""


class DegenerateTimelineError(BurndownError, UserWarning):
    """Issued as a warning when the start and end dates coincide.

    The pipeline does not abort; the ideal series falls back to burning the
    whole scope on day zero.
    """

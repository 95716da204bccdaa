"""Application configuration utilities."""

from .settings import DEFAULT_CHART_TITLE, DEFAULT_OUTPUT, Settings, get_settings

__all__ = [
    "DEFAULT_CHART_TITLE",
    "DEFAULT_OUTPUT",
    "Settings",
    "get_settings",
]

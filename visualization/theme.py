"""Shared Plotly theme tokens for burndown visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_font: str = "sans-serif"
    title_size: int = 18
    axis_title_size: int = 14
    label_size: int = 12
    title_color: str = "#333333"
    axis_color: str = "#666666"
    grid_color: str = "#E0E0E0"
    ideal_color: str = "#4F46E5"
    actual_color: str = "#EF4444"
    actual_fill: str = "rgba(239, 68, 68, 0.1)"
    milestone_color: str = "#000000"
    neutral_white: str = "#FFFFFF"
    background: str = "#FFFFFF"
    x_tick_step: int = 5
    margin_left: int = 80
    margin_right: int = 30
    margin_top: int = 80
    margin_bottom: int = 110


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling and plot-area geometry consistent
    between the chart builder and the milestone overlay.
    """

    return _TOKENS

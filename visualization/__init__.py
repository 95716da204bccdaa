"""Visualization utilities for burndown charts."""

from .charts import LinearScale, PlotArea, build_burndown_chart, write_chart_png
from .theme import theme_tokens

__all__ = [
    "LinearScale",
    "PlotArea",
    "build_burndown_chart",
    "write_chart_png",
    "theme_tokens",
]

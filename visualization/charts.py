"""Plotly chart builder and PNG export for burndown data."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import plotly.graph_objects as go

from analytics.milestones import place_milestone_markers
from analytics.series import build_series_frames
from config.settings import Settings, get_settings
from core.models import BurndownData, MilestoneMarker

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "LinearScale",
    "PlotArea",
    "build_burndown_chart",
    "write_chart_png",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearScale:
    """Linear mapping from a data domain onto a pixel range."""

    domain_min: float
    domain_max: float
    range_min: float
    range_max: float

    def __call__(self, value: float) -> float:
        span = self.domain_max - self.domain_min
        if span == 0:
            return self.range_min
        fraction = (value - self.domain_min) / span
        return self.range_min + fraction * (self.range_max - self.range_min)


@dataclass(frozen=True)
class PlotArea:
    """Pixel geometry of the plotting area inside a figure of fixed size."""

    width: int
    height: int
    left: int
    right: int
    top: int
    bottom: int

    @property
    def x_start(self) -> float:
        return float(self.left)

    @property
    def x_end(self) -> float:
        return float(self.width - self.right)

    @property
    def baseline(self) -> float:
        """Pixel row of the x-axis (rows grow downwards)."""

        return float(self.height - self.bottom)

    def paper_x(self, pixel: float) -> float:
        return (pixel - self.x_start) / (self.x_end - self.x_start)

    def paper_y(self, pixel: float) -> float:
        return (self.baseline - pixel) / (self.baseline - self.top)


def _plot_area(settings: Settings) -> PlotArea:
    return PlotArea(
        width=settings.chart_width,
        height=settings.chart_height,
        left=TOKENS.margin_left,
        right=TOKENS.margin_right,
        top=TOKENS.margin_top,
        bottom=TOKENS.margin_bottom,
    )


def _x_domain(data: BurndownData) -> tuple[float, float]:
    xs = [0.0]
    xs.extend(point.x for point in data["ideal_series"])
    xs.extend(point.x for point in data["actual_series"])
    xs.extend(float(annotation.day_offset) for annotation in data["milestones"])
    low, high = min(xs), max(xs)
    if high == low:
        high = low + 1.0
    return low, high


def _y_max(data: BurndownData) -> float:
    ys = [data["total_scope"]]
    ys.extend(point.y for point in data["ideal_series"])
    ys.extend(point.y for point in data["actual_series"])
    top = max(ys)
    return top * 1.05 if top > 0 else 1.0


def _add_milestone_overlay(fig: go.Figure, markers: list[MilestoneMarker], area: PlotArea) -> None:
    for marker in markers:
        x = area.paper_x(marker.x_pixel)
        fig.add_shape(
            type="line",
            xref="paper",
            yref="paper",
            x0=x,
            x1=x,
            y0=area.paper_y(marker.axis_pixel),
            y1=area.paper_y(marker.tick_end_pixel),
            line=dict(color=TOKENS.milestone_color, width=1),
        )
        fig.add_annotation(
            text=f"<b>{marker.label}</b>",
            xref="paper",
            yref="paper",
            x=x,
            y=area.paper_y(marker.label_pixel),
            xanchor="center",
            yanchor="top",
            showarrow=False,
            font=dict(color=TOKENS.milestone_color, size=TOKENS.label_size, family=TOKENS.label_font),
        )


def build_burndown_chart(data: BurndownData, settings: Settings | None = None) -> go.Figure:
    """Render ideal and actual burndown lines with milestone labels under the x-axis."""

    settings = settings or get_settings()
    area = _plot_area(settings)
    ideal_df, actual_df = build_series_frames(data)
    x_min, x_max = _x_domain(data)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=ideal_df["Day"],
            y=ideal_df["Remaining"],
            customdata=ideal_df["Date"],
            mode="lines",
            name="Ideal Burndown",
            line=dict(color=TOKENS.ideal_color, width=2),
            hovertemplate="%{customdata}<br>Remaining: %{y:,.2f} pts<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=actual_df["Day"],
            y=actual_df["Remaining"],
            mode="lines+markers",
            name="Actual Progress",
            line=dict(color=TOKENS.actual_color, width=3),
            marker=dict(size=6, color=TOKENS.neutral_white, line=dict(color=TOKENS.actual_color, width=2)),
            fill="tozeroy",
            fillcolor=TOKENS.actual_fill,
            hovertemplate="Day %{x:.2f}<br>Remaining: %{y:,.2f} pts<extra></extra>",
        )
    )

    fig.update_layout(
        width=area.width,
        height=area.height,
        title=dict(
            text=f"<b>{settings.chart_title}</b>",
            font=dict(size=TOKENS.title_size, color=TOKENS.title_color, family=TOKENS.label_font),
            x=0.5,
        ),
        margin=dict(l=area.left, r=area.right, t=area.top, b=area.bottom, autoexpand=False),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
        xaxis=dict(
            type="linear",
            range=[x_min, x_max],
            showgrid=False,
            zeroline=False,
            tick0=0,
            dtick=TOKENS.x_tick_step,
            color=TOKENS.axis_color,
            title=dict(text="Timeline (Days)", font=dict(size=TOKENS.axis_title_size)),
        ),
        yaxis=dict(
            range=[0, _y_max(data)],
            showgrid=True,
            gridcolor=TOKENS.grid_color,
            zeroline=False,
            color=TOKENS.title_color,
            title=dict(text="<b>Remaining Effort (Points)</b>", font=dict(size=TOKENS.axis_title_size)),
        ),
        plot_bgcolor=TOKENS.background,
        paper_bgcolor=TOKENS.background,
    )

    x_scale = LinearScale(domain_min=x_min, domain_max=x_max, range_min=area.x_start, range_max=area.x_end)
    markers = place_milestone_markers(data["milestones"], x_scale, area.baseline)
    _add_milestone_overlay(fig, markers, area)
    return fig


def write_chart_png(fig: go.Figure, output_path: str | Path, settings: Settings | None = None) -> Path:
    """Export ``fig`` as PNG through Plotly's image engine, creating parent directories."""

    settings = settings or get_settings()
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_image(str(path), format="png", **settings.image_kwargs)
    logger.info("Chart written to %s", path)
    return path

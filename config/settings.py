"""Centralised configuration handling for the burndown chart generator."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHART_TITLE = "Task-Granularity Burndown Chart"
DEFAULT_OUTPUT = "chart.png"


class Settings(BaseSettings):
    """Rendering and CLI settings sourced from ``BURNDOWN_*`` environment variables."""

    chart_width: int = Field(default=1000, gt=0)
    chart_height: int = Field(default=600, gt=0)
    chart_scale: float = Field(default=1.0, gt=0)
    chart_title: str = DEFAULT_CHART_TITLE
    default_output: str = DEFAULT_OUTPUT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BURNDOWN_", extra="ignore")

    @property
    def image_kwargs(self) -> dict[str, float]:
        return {"width": self.chart_width, "height": self.chart_height, "scale": self.chart_scale}


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()

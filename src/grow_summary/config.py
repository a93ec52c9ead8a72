"""
Application settings.

Values come from (highest priority first) CLI flags, ``GROW_SUMMARY_*``
environment variables, a local ``.env`` file, then the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from grow_summary.stats.day import DEFAULT_GDD_THRESHOLD_F


class Settings(BaseSettings):
    """Runtime configuration for the summary pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="GROW_SUMMARY_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "grow-summary"
    app_env: str = "development"
    debug: bool = False

    readings_path: Path = Path("data/example.csv")
    events_path: Path | None = Path("data/events.csv")
    output_path: Path = Path("data/out_example.csv")

    gdd_threshold: float = Field(default=DEFAULT_GDD_THRESHOLD_F, description="GDD base temp")
    schema_name: Literal["full", "reduced"] = "full"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()

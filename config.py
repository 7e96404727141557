"""
Central configuration for the background composition engine.
All core constants and environment-driven settings live here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    # ── Viewport ────────────────────────────────────────────────────
    VIEWPORT_SIZE: int = 100  # normalized units, both axes

    # ── Export ──────────────────────────────────────────────────────
    DEFAULT_WIDTH: int = 1920
    DEFAULT_HEIGHT: int = 1080
    RASTER_TIMEOUT_MS: int = 30000
    RASTER_HEADLESS: bool = True

    # ── Generation ──────────────────────────────────────────────────
    SEED_RANGE: int = 10000
    PALETTE_MIN: int = 2
    PALETTE_MAX: int = 5
    NUM_VARIATIONS: int = 5

    # ── Logging ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Paths ───────────────────────────────────────────────────────
    PROJECT_ROOT: Path = Path(__file__).parent
    OUTPUTS_DIR: Optional[Path] = None

    @model_validator(mode="after")
    def _set_default_paths(self) -> Settings:
        if self.OUTPUTS_DIR is None:
            self.OUTPUTS_DIR = self.PROJECT_ROOT / "outputs"
        return self

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def configure_logging(level: Optional[str] = None) -> None:
    """Install the root handler used by scripts and the host UI."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Singleton instance
settings = Settings()

# schemast/config.py
"""
schemast configuration via Pydantic Settings.

Resolution order: CLI flags > env vars (SCHEMAST_*) > .env file > defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemastConfig(BaseSettings):
    """Central configuration for schemast."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Schema package ---
    schema_dir: Path = Path("schema")

    # --- Rendering ---
    # Spaces per indentation level inside a rendered field list.
    indent: int = Field(4, ge=1, le=8)

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # --- Paths ---
    home_dir: Path = Field(default_factory=lambda: Path.home() / ".schemast")

    @property
    def log_dir(self) -> Path:
        return self.home_dir / "logs"


@lru_cache(maxsize=1)
def get_config() -> SchemastConfig:
    """Return the global config singleton."""
    return SchemastConfig()

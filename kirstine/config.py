"""Configuration management for kirstine.

Uses pydantic-settings for type-safe environment variable loading.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from ``KIRSTINE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KIRSTINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Grouping
    mode_precision: int | None = Field(
        default=None,
        ge=1,
        le=17,
        description="Significant digits used to group values in mode (None = shortest repr)",
    )

    # Summaries
    default_kind: Literal["sample", "population"] = Field(
        default="sample",
        description="Dispersion estimator used by describe() when none is given",
    )
    display_precision: int = Field(
        default=4,
        ge=1,
        le=17,
        description="Significant digits in format_for_display output",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level applied by configure_logging",
    )

    @property
    def uses_sample_estimator(self) -> bool:
        """Check if summaries default to the N - 1 divisor."""
        return self.default_kind == "sample"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def configure_logging(level: str | None = None) -> None:
    """Route kirstine's diagnostics to the root handler.

    Args:
        level: Logging level name; defaults to ``Settings.log_level``
    """
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

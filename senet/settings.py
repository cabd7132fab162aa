"""
Environment configuration using pydantic-settings.

Environment variables (prefix: SENET_):
    SENET_LOG_LEVEL     - Root log level (default: INFO)
    SENET_LOG_FORMAT    - logging format string
    SENET_RECORD_EVENTS - Keep per-player event logs in sessions (default: true)
    SENET_MAX_MOVES     - Move cap for self-play (default: 500)
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Runtime settings for sessions and the self-play CLI."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SENET_",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Format string passed to logging.basicConfig.",
    )
    record_events: bool = Field(default=True)
    max_moves: Optional[int] = Field(default=500, gt=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard level name, case-insensitively."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Return cached engine settings instance."""
    return EngineSettings()


def configure_logging(settings: Optional[EngineSettings] = None) -> None:
    """Apply the configured level and format to the root logger."""
    settings = settings or get_engine_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)

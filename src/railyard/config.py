"""
Configuration — typed, validated settings loaded from environment/.env.

railyard itself is pure and needs no configuration to work. The settings
below only drive logging setup when the host application opts in through
railyard.observability.configure_logging().

Environment variables:
  RAILYARD_LOG_LEVEL  standard level name (default INFO)
  RAILYARD_JSON_LOGS  true → JSON lines, false → human-readable console
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RailyardSettings(BaseSettings):
    """Logging settings for hosts embedding railyard."""

    model_config = SettingsConfigDict(
        env_prefix="RAILYARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level for railyard log events")
    json_logs: bool = Field(default=False, description="Render log events as JSON lines")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard level name, case-insensitively."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

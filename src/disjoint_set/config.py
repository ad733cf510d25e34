"""Library configuration using pydantic-settings."""

import logging
from typing import Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from disjoint_set.logging import configure_logging

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DISJOINT_SET_",
        extra="ignore",
    )

    thread_safe: bool = Field(
        default=False,
        description="Guard registries built by create_registry with a lock",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON instead of pretty console output",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize the level name to upper case and reject unknown names."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        """Return the numeric logging level for log_level."""
        return logging.getLevelNamesMapping()[self.log_level]

    def apply_logging(self) -> None:
        """Configure structlog from these settings."""
        configure_logging(json_output=self.json_logs, level=self.logging_level)

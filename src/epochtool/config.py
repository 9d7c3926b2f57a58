"""Environment-based configuration."""

from __future__ import annotations

import logging
from datetime import timedelta

from pydantic import field_validator
from pydantic_settings import BaseSettings

from epochtool.constants import MAX_UTC_OFFSET_SECONDS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and ``EPOCHTOOL_*`` environment variables."""

    # Logging
    log_level: str = "WARNING"

    # Output
    color: bool = False
    json_indent: int = 2

    # Local readings (None = process time zone)
    utc_offset_seconds: int | None = None

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("utc_offset_seconds")
    @classmethod
    def _validate_offset(cls, v: int | None) -> int | None:
        if v is not None and abs(v) >= MAX_UTC_OFFSET_SECONDS:
            raise ValueError(
                "utc_offset_seconds must be strictly within +/-24h"
            )
        return v

    @property
    def utc_offset(self) -> timedelta | None:
        """Configured offset as a timedelta, None for the process zone."""
        if self.utc_offset_seconds is None:
            return None
        return timedelta(seconds=self.utc_offset_seconds)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "EPOCHTOOL_",
        "extra": "ignore",
    }

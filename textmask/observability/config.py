"""Configuration for textmask logging."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format (json or text)")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case the level name."""
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format is supported."""
        v = v.lower()
        if v not in {"json", "text"}:
            raise ValueError(f"Invalid log format '{v}'. Valid formats: json, text")
        return v

    @classmethod
    def from_env(cls) -> LoggingConfig:
        """Load configuration from environment variables."""
        defaults = cls()
        return cls(
            level=os.getenv("TEXTMASK_LOG_LEVEL", defaults.level),
            format=os.getenv("TEXTMASK_LOG_FORMAT", defaults.format),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


# Global configuration instance
_config: LoggingConfig | None = None


def get_config() -> LoggingConfig:
    """Get the global logging configuration."""
    global _config
    if _config is None:
        _config = LoggingConfig.from_env()
    return _config


def set_config(config: LoggingConfig | None) -> None:
    """Set the global logging configuration, or clear it with None."""
    global _config
    _config = config

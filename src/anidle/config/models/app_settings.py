"""Catalog and logging configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from anidle.shared.constants import Logging

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CatalogSettings(BaseModel):
    """Catalog source.

    When ``path`` is unset the sample catalog bundled with the package is used.
    """

    path: Path | None = Field(default=None, description="Path to a JSON catalog file")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="JSON-lines log file path")
    console_output: bool = Field(default=True, description="Enable console logging")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            msg = f"Unknown log level '{value}', expected one of {', '.join(_LEVELS)}"
            raise ValueError(msg)
        return level


__all__ = ["CatalogSettings", "LoggingSettings"]

"""
CLI Context Management Module

Holds the global options parsed by the main callback in a pydantic model
stored in a ContextVar, so every Typer command reads them the same way.
"""

from __future__ import annotations

import contextvars
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """
    Global CLI options.

    Attributes:
        log_level: Explicit log level (None defers to configuration)
        config_path: Explicit TOML configuration file
    """

    log_level: LogLevel | None = Field(
        default=None,
        description="Logging level overriding the configured one",
    )
    config_path: Path | None = Field(
        default=None,
        description="Configuration file to load instead of the default locations",
    )


cli_context_var: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """
    Get the current CLI context.

    Returns a default context when the main callback has not run, which
    happens when commands are invoked directly in tests.
    """
    context = cli_context_var.get()
    if context is None:
        return CliContext()
    return context


def set_cli_context(context: CliContext) -> None:
    """Set the current CLI context."""
    cli_context_var.set(context)


def clear_cli_context() -> None:
    """Clear the current CLI context."""
    cli_context_var.set(None)


__all__ = [
    "CliContext",
    "LogLevel",
    "clear_cli_context",
    "get_cli_context",
    "set_cli_context",
]

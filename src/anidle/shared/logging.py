"""
Logging for Anidle.

``setup_logging`` configures the ``anidle`` logger: Rich output on
stderr, keeping stdout free for the game board and JSON output, plus an
optional JSON-lines file. The ``log_*`` helpers attach operation names
and context as record attributes so the file handler can keep them.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from anidle.shared.constants import Logging
from anidle.shared.errors import ErrorContext

# Record attributes copied into JSON lines when present
STRUCTURED_FIELDS = ("operation", "error_code", "duration_ms", "result_info", "context")

_LOG_THEME = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "green",
        "logging.level.warning": "yellow",
        "logging.level.error": "bold red",
        "log.time": "dim",
    }
)


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {key: getattr(record, key) for key in STRUCTURED_FIELDS if hasattr(record, key)}
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(
    name: str = Logging.DEFAULT_LOGGER_NAME,
    level: str = Logging.DEFAULT_LEVEL,
    log_file: str | Path | None = None,
    *,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure and return the logger called ``name``.

    Calling it again replaces the handlers of the previous call.

    Args:
        name: Logger to configure
        level: Level name, case-insensitive (default "WARNING")
        log_file: JSON-lines log file, created with its parent directories
        console_output: Log to stderr through Rich
    """
    logger = logging.getLogger(name)
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    log_level = logging.getLevelName(level.upper())
    logger.setLevel(log_level)

    if console_output:
        console_handler = RichHandler(
            console=Console(theme=_LOG_THEME, stderr=True),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format=Logging.TIME_FORMAT,
        )
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def _as_dict(context: dict[str, Any] | ErrorContext | None) -> dict[str, Any]:
    if isinstance(context, ErrorContext):
        return context.safe_dict()
    return dict(context or {})


def log_operation_start(
    logger: logging.Logger,
    operation: str,
    context: dict[str, Any] | None = None,
) -> None:
    logger.debug(
        "Starting operation '%s'",
        operation,
        extra={"operation": operation, "context": _as_dict(context)},
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
    context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """Record a finished operation with its duration in milliseconds."""
    logger.debug(
        "Operation '%s' completed successfully",
        operation,
        extra={
            "operation": operation,
            "duration_ms": duration_ms,
            "result_info": result_info or {},
            "context": _as_dict(context),
        },
    )


def log_validation_error(
    logger: logging.Logger,
    field: str,
    value: Any,
    reason: str,
    context: dict[str, Any] | None = None,
) -> None:
    """Record a rejected input value at debug level."""
    details = {"field": field, "value": str(value), "reason": reason, **(context or {})}
    logger.debug(
        "Rejected %s '%s': %s",
        field,
        value,
        reason,
        extra={
            "operation": "validation",
            "error_code": "VALIDATION_ERROR",
            "context": details,
        },
    )


__all__ = [
    "StructuredFormatter",
    "log_operation_start",
    "log_operation_success",
    "log_validation_error",
    "setup_logging",
]

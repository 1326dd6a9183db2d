"""Anidle error types.

Every failure the application raises is an ``AnidleError`` carrying an
``ErrorCode`` and an ``ErrorContext`` that can be written to structured
logs. Subclasses tell callers which layer failed:

- DomainError: catalog or round rules were broken
- InfrastructureError: a file could not be read
- ApplicationError / CliError: configuration and command failures

Rejected guesses (unknown title, duplicate guess, round over) are not
raised. The round engine reports them in its result value; their codes
live here so both paths log the same names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

ContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """All error codes used by Anidle."""

    # Catalog
    EMPTY_CATALOG = "EMPTY_CATALOG"
    DUPLICATE_TITLE = "DUPLICATE_TITLE"
    INVALID_CATALOG = "INVALID_CATALOG"

    # Rounds
    UNKNOWN_TITLE = "UNKNOWN_TITLE"
    DUPLICATE_GUESS = "DUPLICATE_GUESS"
    ROUND_OVER = "ROUND_OVER"
    UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"

    # Files
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    FILE_READ_ERROR = "FILE_READ_ERROR"

    # Configuration
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"

    # CLI
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"
    CLI_COMMAND_INTERRUPTED = "CLI_COMMAND_INTERRUPTED"


def _to_context_value(key: str, value: object) -> ContextValue:
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    msg = f"Context value for '{key}' must be a primitive, Path or Enum, got {type(value).__name__}"
    raise TypeError(msg)


@dataclass(frozen=True)
class ErrorContext:
    """Where an error happened.

    ``additional_data`` is restricted to primitives (Paths and Enums are
    converted) so a context always serializes into a log line.

    Raises:
        TypeError: additional_data is not a dict or holds other types
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, ContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is None:
            return
        if not isinstance(self.additional_data, dict):
            msg = f"additional_data must be a dict, got {type(self.additional_data).__name__}"
            raise TypeError(msg)
        converted = {
            key: _to_context_value(key, value) for key, value in self.additional_data.items()
        }
        object.__setattr__(self, "additional_data", converted)

    def safe_dict(self) -> dict[str, Any]:
        """Context as a plain dict; ``additional_data`` is always present.

        Example:
            >>> ErrorContext(file_path="/catalog.json").safe_dict()
            {'file_path': '/catalog.json', 'additional_data': {}}
        """
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = dict(self.additional_data or {})
        return data


class AnidleError(Exception):
    """Base class of every Anidle error.

    Args:
        code: What went wrong
        message: Text shown to the user
        context: Where it went wrong
        original_error: Exception this error wraps, if any
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(AnidleError):
    """Catalog or round rules were broken.

    Raised for an empty catalog, a title appearing twice in one catalog,
    malformed catalog entries, or a round answer missing from the catalog.
    """


class InfrastructureError(AnidleError):
    """A catalog file could not be found or read."""


class ApplicationError(AnidleError):
    """Configuration or application flow failed."""


class CliError(ApplicationError):
    """A command failed; carries the command name and its exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_empty_catalog_error(operation: str | None = None) -> DomainError:
    return DomainError(
        ErrorCode.EMPTY_CATALOG,
        "Catalog must contain at least one record",
        ErrorContext(operation=operation),
    )


def create_duplicate_title_error(title: str, operation: str | None = None) -> DomainError:
    return DomainError(
        ErrorCode.DUPLICATE_TITLE,
        f"Duplicate title in catalog: {title}",
        ErrorContext(operation=operation, additional_data={"title": title}),
    )


def create_unknown_title_error(title: str, operation: str | None = None) -> DomainError:
    return DomainError(
        ErrorCode.UNKNOWN_TITLE,
        f"Title not found in catalog: {title}",
        ErrorContext(operation=operation, additional_data={"title": title}),
    )


def create_file_not_found_error(
    file_path: str,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> InfrastructureError:
    return InfrastructureError(
        ErrorCode.FILE_NOT_FOUND,
        f"File not found: {file_path}",
        ErrorContext(file_path=file_path, operation=operation),
        original_error,
    )


def create_cli_error(
    message: str,
    command: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
) -> CliError:
    """Wrap an unexpected failure of ``command``."""
    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        message,
        ErrorContext(
            operation=operation,
            additional_data={"command": command} if command else None,
        ),
        original_error,
        command,
        exit_code,
    )


__all__ = [
    "AnidleError",
    "ApplicationError",
    "CliError",
    "DomainError",
    "ErrorCode",
    "ErrorContext",
    "InfrastructureError",
    "create_cli_error",
    "create_duplicate_title_error",
    "create_empty_catalog_error",
    "create_file_not_found_error",
    "create_unknown_title_error",
]

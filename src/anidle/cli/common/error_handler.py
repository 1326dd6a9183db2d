"""
Command error handling.

Every command funnels exceptions through ``handle_cli_error``, which turns
them into a CliError, logs them and reports them to the user as a line on
stderr or, with ``--json``, as a JSON document on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import orjson

from anidle.shared.constants import CLIDefaults
from anidle.shared.errors import (
    AnidleError,
    CliError,
    ErrorCode,
    create_cli_error,
)

logger = logging.getLogger(__name__)


def format_json_output(
    command: str,
    *,
    success: bool,
    errors: list[str] | None = None,
    data: dict[str, Any] | None = None,
) -> bytes:
    """Build the JSON document printed by ``--json`` commands.

    ``errors`` and ``data`` are omitted when empty.
    """
    output: dict[str, Any] = {"success": success, "command": command}
    if errors:
        output["errors"] = errors
    if data is not None:
        output["data"] = data
    return orjson.dumps(output, option=orjson.OPT_INDENT_2)


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Report ``error`` raised by ``command`` and return the exit code."""
    cli_error = _map_error_to_cli_error(error, command)
    _log_error(error, command, cli_error)
    _output_error(cli_error, error, command, json_output=json_output)
    return cli_error.exit_code


def _map_error_to_cli_error(error: Exception, command: str) -> CliError:
    if isinstance(error, CliError):
        return error

    if isinstance(error, KeyboardInterrupt):
        return CliError(
            ErrorCode.CLI_COMMAND_INTERRUPTED,
            "Command interrupted by user",
            command=command,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    # Known errors keep their code and context
    if isinstance(error, AnidleError):
        return CliError(
            error.code,
            error.message,
            error.context,
            original_error=error,
            command=command,
        )

    if isinstance(error, OSError):
        return create_cli_error(
            message=f"File system error: {error}",
            command=command,
            original_error=error,
        )

    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error,
    )


def _log_error(error: Exception, command: str, cli_error: CliError) -> None:
    extra = {
        "operation": command,
        "error_code": cli_error.code.value,
        "context": {"error_type": type(error).__name__, **cli_error.context.safe_dict()},
    }
    if isinstance(error, (KeyboardInterrupt, AnidleError)):
        logger.warning("%s failed: %s", command, cli_error.message, extra=extra)
    else:
        logger.error("%s failed: %s", command, cli_error.message, extra=extra, exc_info=error)


def _output_error(
    cli_error: CliError,
    error: Exception,
    command: str,
    *,
    json_output: bool,
) -> None:
    if json_output:
        payload = format_json_output(
            command,
            success=False,
            errors=[cli_error.message],
            data={
                "error_code": cli_error.code.value,
                "error_type": type(error).__name__,
                "exit_code": cli_error.exit_code,
            },
        )
        sys.stdout.write(payload.decode("utf-8") + "\n")
        sys.stdout.flush()
    else:
        sys.stderr.write(f"Error: {cli_error.message}\n")


__all__ = ["format_json_output", "handle_cli_error"]

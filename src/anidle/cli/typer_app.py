"""
Anidle Typer CLI Application

Terminal front end of the guessing game. Commands build a runtime
(configuration, logging, catalog, engine) and hand it to a handler; any
error is routed through ``handle_cli_error``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from anidle.cli.catalog_handler import compare_command, titles_command
from anidle.cli.common.context import CliContext, LogLevel, set_cli_context
from anidle.cli.common.error_handler import handle_cli_error
from anidle.cli.common.setup import build_runtime
from anidle.cli.play_handler import play_command
from anidle.shared.constants import CLICommands, CLIDefaults, CLIHelp

__version__ = CLIDefaults.VERSION

catalog_option = typer.Option(
    None,
    "--catalog",
    "-c",
    help=CLIHelp.CATALOG_HELP,
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)

json_option = typer.Option(False, "--json", help=CLIHelp.JSON_HELP)


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def main_callback(
    log_level: Optional[LogLevel],
    config_path: Optional[Path],
    version: bool,
) -> None:
    """Store the global options in the CLI context."""
    if version:
        version_callback(value=True)

    set_cli_context(CliContext(log_level=log_level, config_path=config_path))


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option(
            "--log-level",
            case_sensitive=False,
            help="Set the logging level (overrides the configuration).",
        ),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help=CLIHelp.CONFIG_HELP, dir_okay=False),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version information and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Anidle - guess the anime from its attributes."""
    main_callback(log_level, config_path, version)


@app.command(CLICommands.PLAY)
def play_command_typer(
    catalog: Optional[Path] = catalog_option,
    seed: Optional[int] = typer.Option(None, "--seed", help=CLIHelp.SEED_HELP),
    answer: Optional[str] = typer.Option(None, "--answer", help=CLIHelp.ANSWER_HELP),
) -> None:
    """
    Play rounds interactively.

    Type a title to guess it. Each guessed attribute is compared with the
    answer: green values match, arrows point toward the answer's number.

    Examples:
        anidle play

        anidle play --catalog anime-offline-database.json --seed 7
    """
    try:
        runtime = build_runtime(catalog, seed)
        play_command(runtime, Console(), answer_title=answer)
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(handle_cli_error(e, CLICommands.PLAY)) from e


@app.command(CLICommands.TITLES)
def titles_command_typer(
    catalog: Optional[Path] = catalog_option,
    json_output: bool = json_option,
) -> None:
    """List every title of the catalog."""
    try:
        runtime = build_runtime(catalog)
        titles_command(runtime, Console(), json_output=json_output)
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(
            handle_cli_error(e, CLICommands.TITLES, json_output=json_output),
        ) from e


@app.command(CLICommands.COMPARE)
def compare_command_typer(
    guess: str = typer.Argument(..., help="Guessed title"),
    answer: str = typer.Argument(..., help="Answer title"),
    catalog: Optional[Path] = catalog_option,
    seed: Optional[int] = typer.Option(None, "--seed", help=CLIHelp.SEED_HELP),
    json_output: bool = json_option,
) -> None:
    """Compare a guessed title with an answer title."""
    try:
        runtime = build_runtime(catalog, seed)
        compare_command(runtime, Console(), guess, answer, json_output=json_output)
    except Exception as e:  # noqa: BLE001
        raise typer.Exit(
            handle_cli_error(e, CLICommands.COMPARE, json_output=json_output),
        ) from e


__all__ = ["app", "main_callback"]

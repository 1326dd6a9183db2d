"""Catalog commands: list titles and compare two titles."""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.table import Table

from anidle.cli.common.error_handler import format_json_output
from anidle.cli.common.setup import GameRuntime
from anidle.cli.render import comparison_to_dict, render_comparison
from anidle.engine import compare_records
from anidle.shared.constants import CLICommands
from anidle.shared.errors import create_unknown_title_error

logger = logging.getLogger(__name__)


def _write_json(command: str, data: dict) -> None:
    sys.stdout.write(format_json_output(command, success=True, data=data).decode("utf-8") + "\n")
    sys.stdout.flush()


def titles_command(runtime: GameRuntime, console: Console, *, json_output: bool = False) -> None:
    """Print every catalog title in catalog order."""
    titles = runtime.catalog.titles()
    if json_output:
        _write_json(CLICommands.TITLES, {"count": len(titles), "titles": titles})
        return

    for title in titles:
        console.print(title, markup=False, highlight=False)


def compare_command(
    runtime: GameRuntime,
    console: Console,
    guess_title: str,
    answer_title: str,
    *,
    json_output: bool = False,
) -> None:
    """Compare one guessed title against an answer title.

    Raises:
        DomainError: UNKNOWN_TITLE if either title is not in the catalog
    """
    catalog = runtime.catalog
    guess = catalog.find_by_title(guess_title)
    if guess is None:
        raise create_unknown_title_error(guess_title, operation=CLICommands.COMPARE)
    answer = catalog.find_by_title(answer_title)
    if answer is None:
        raise create_unknown_title_error(answer_title, operation=CLICommands.COMPARE)

    engine = runtime.engine
    comparison = compare_records(
        answer,
        guess,
        engine.attributes,
        rng=engine.rng,
        limit=engine.list_display_limit,
    )
    logger.debug("Compared '%s' against '%s'", guess_title, answer_title)

    if json_output:
        _write_json(
            CLICommands.COMPARE,
            {
                "guess": guess_title,
                "answer": answer_title,
                "correct": guess_title == answer_title,
                "comparison": comparison_to_dict(comparison),
            },
        )
        return

    table = Table(title=f"{guess_title} vs. ?", show_lines=True)
    table.add_column("Attribute")
    table.add_column("Guess")
    for spec in engine.attributes:
        table.add_row(spec.label, render_comparison(comparison[spec.name]))
    console.print(table)


__all__ = ["compare_command", "titles_command"]

"""Interactive play command.

Reads guesses from the terminal, forwards them to the round engine and
renders the board after every accepted guess. The engine matches titles
exactly; this front end only helps the player type them with
case-insensitive resolution and fuzzy suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from rapidfuzz import fuzz, process, utils
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from anidle.cli.common.setup import GameRuntime
from anidle.cli.render import build_history_table, counter_text
from anidle.engine import GuessStatus, Outcome, RoundEngine
from anidle.shared.constants import CLIMessages, PromptCommands

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 3
SUGGESTION_CUTOFF = 60.0


def suggest_titles(query: str, titles: Sequence[str], limit: int = SUGGESTION_LIMIT) -> list[str]:
    """Closest titles to ``query`` by weighted fuzzy ratio."""
    matches = process.extract(
        query,
        titles,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return [choice for choice, _score, _index in matches]


def resolve_title(query: str, titles: Sequence[str]) -> str:
    """Return the catalog spelling of ``query`` when it differs only in case.

    Ambiguous or unknown queries are returned unchanged and left for the
    engine to reject.
    """
    if query in titles:
        return query
    folded = query.casefold()
    candidates = [title for title in titles if title.casefold() == folded]
    return candidates[0] if len(candidates) == 1 else query


def _prompt_reader(console: Console) -> Callable[[], str]:
    def ask() -> str:
        return Prompt.ask(CLIMessages.PROMPT, console=console, default="", show_default=False)

    return ask


def show_board(console: Console, engine: RoundEngine) -> None:
    state = engine.state
    if state.history:
        console.print(build_history_table(state, engine.attributes))
    else:
        console.print(CLIMessages.FIRST_GUESS)
    console.print(counter_text(state))

    if state.outcome is Outcome.WON:
        console.print(CLIMessages.WIN)
    elif state.outcome is Outcome.LOST:
        console.print(CLIMessages.LOSE.format(title=escape(state.answer_title)))


def play_turn(console: Console, engine: RoundEngine, raw: str) -> bool:
    """Handle one line of input. Returns False when the player quits."""
    command = raw.strip()
    if not command:
        return True

    if command == PromptCommands.QUIT:
        return False

    if command == PromptCommands.NEW_ROUND:
        engine.start_round()
        show_board(console, engine)
        return True

    if command == PromptCommands.GIVE_UP:
        engine.give_up()
        show_board(console, engine)
        return True

    if command == PromptCommands.TITLES:
        console.print(", ".join(engine.available_titles()), markup=False)
        return True

    title = resolve_title(command, engine.catalog.titles())
    result = engine.submit_guess(title)

    if result.status is GuessStatus.UNKNOWN_TITLE:
        console.print(CLIMessages.UNKNOWN_TITLE.format(title=escape(command)))
        suggestions = suggest_titles(command, engine.available_titles())
        if suggestions:
            listed = escape(", ".join(suggestions))
            console.print(CLIMessages.SUGGESTIONS.format(suggestions=listed))
    elif result.status is GuessStatus.DUPLICATE_GUESS:
        console.print(CLIMessages.DUPLICATE_GUESS.format(title=escape(title)))
    elif result.status is GuessStatus.ROUND_OVER:
        console.print(CLIMessages.ROUND_OVER.format(new=PromptCommands.NEW_ROUND))
    else:
        show_board(console, engine)

    return True


def play_command(
    runtime: GameRuntime,
    console: Console,
    answer_title: str | None = None,
    read_line: Callable[[], str] | None = None,
) -> None:
    """Run the interactive game until the player quits or input ends.

    Args:
        runtime: Configured catalog and engine
        console: Rich console to render to
        answer_title: Fixed answer for the first round
        read_line: Input source (defaults to a Rich prompt)
    """
    engine = runtime.engine
    if answer_title is not None:
        engine.start_round(answer_title)

    next_line = read_line or _prompt_reader(console)

    console.print(
        CLIMessages.HELP.format(
            give_up=PromptCommands.GIVE_UP,
            new=PromptCommands.NEW_ROUND,
            titles=PromptCommands.TITLES,
            quit=PromptCommands.QUIT,
        ),
        markup=False,
    )
    show_board(console, engine)

    while True:
        try:
            raw = next_line()
        except EOFError:
            break
        if not play_turn(console, engine, raw):
            break

    logger.debug("Play session ended with outcome %s", engine.state.outcome.value)


__all__ = ["play_command", "play_turn", "resolve_title", "show_board", "suggest_titles"]

"""
CLI Configuration Constants

Command names, help texts and in-game prompt commands.
"""

from .system import Application


class CLIDefaults:
    """Default CLI values."""

    VERSION = Application.VERSION
    EXIT_INTERRUPTED = 130


class CLICommands:
    """CLI command names."""

    PLAY = "play"
    TITLES = "titles"
    COMPARE = "compare"


class PromptCommands:
    """Commands understood by the interactive prompt."""

    GIVE_UP = ":giveup"
    NEW_ROUND = ":new"
    QUIT = ":quit"
    TITLES = ":titles"


class CLIHelp:
    """Help texts."""

    APP_NAME = "anidle"
    APP_DESCRIPTION = "Anidle - guess the anime from its attributes"
    APP_STYLE = "rich"
    VERSION_TEXT = Application.NAME + " v{version}"

    CATALOG_HELP = "Path to a JSON catalog (defaults to the configured or bundled catalog)"
    SEED_HELP = "Seed for the random source (answer choice and tag order)"
    ANSWER_HELP = "Start the first round with this answer instead of a random one"
    JSON_HELP = "Output results in JSON format"
    CONFIG_HELP = "Path to a TOML configuration file"


class CLIMessages:
    """Messages shown by the interactive game."""

    FIRST_GUESS = "Type your first guess to begin the game."
    PROMPT = "Your guess"
    WIN = "[green bold]You win![/green bold]"
    LOSE = "[red bold]You lose.[/red bold] The answer was [bold]{title}[/bold]."
    UNKNOWN_TITLE = "[yellow]'{title}' is not in the catalog.[/yellow]"
    DUPLICATE_GUESS = "[yellow]'{title}' was already guessed.[/yellow]"
    ROUND_OVER = "[yellow]The round is over. Type {new} to play again.[/yellow]"
    COUNTER = "Guess: {count} / {max}"
    HELP = "Commands: {give_up} give up, {new} new round, {titles} list titles, {quit} quit"
    SUGGESTIONS = "Did you mean: {suggestions}"

"""
Game Rule Constants

Guess budget, list display limit and the attribute names compared by default.
"""


class GameRules:
    """Round rules."""

    MAX_GUESSES = 20
    LIST_DISPLAY_LIMIT = 20
    NUMBER_PRECISION = 2


class AttributeNames:
    """Names of the comparable attributes of an anime record."""

    YEAR = "year"
    SEASON = "season"
    EPISODES = "episodes"
    SCORE = "score"
    SOURCE = "source"
    MEDIA_TYPE = "media_type"
    STATUS = "status"
    TAGS = "tags"
    STUDIOS = "studios"
    PRODUCERS = "producers"
    THEMES = "themes"

    # Default board column order
    DEFAULT: tuple[str, ...] = (
        YEAR,
        SEASON,
        EPISODES,
        TAGS,
        STUDIOS,
        PRODUCERS,
        SCORE,
    )


class RevealLinks:
    """Search link used to look a title up."""

    SEARCH_URL = "https://www.google.com/search"
    SEARCH_SITE = "myanimelist.net"

"""Round engine data structures.

Comparison results, guess entries, round state and the value returned by
``RoundEngine.submit_guess``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Union

from anidle.catalog.models import AnimeRecord


class Ordering(str, Enum):
    """How a guessed value relates to the answer's value.

    HIGHER means the guess is above the answer, so the player should go
    lower. NONE makes no claim (categorical mismatch or a missing value).
    """

    EQUAL = "="
    LOWER = "<"
    HIGHER = ">"
    NONE = ""


ScalarValue = Union[str, int, float, None]


@dataclass(frozen=True)
class ScalarComparison:
    """Comparison of one scalar attribute."""

    value: ScalarValue
    ordering: Ordering

    @property
    def is_match(self) -> bool:
        return self.ordering is Ordering.EQUAL


@dataclass(frozen=True)
class ListItemComparison:
    """One member of a guessed set attribute."""

    item: str
    matched: bool

    @property
    def ordering(self) -> Ordering:
        return Ordering.EQUAL if self.matched else Ordering.NONE


ListComparison = tuple[ListItemComparison, ...]
ComparisonResult = Union[ScalarComparison, ListComparison]


@dataclass(frozen=True)
class GuessEntry:
    """A guessed record and its comparison against the answer.

    Attributes:
        record: The guessed record
        comparison: Attribute name to comparison result, in display order
        is_reveal: True only for the entry recorded by giving up
    """

    record: AnimeRecord
    comparison: Mapping[str, ComparisonResult]
    is_reveal: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparison", MappingProxyType(dict(self.comparison)))

    @property
    def title(self) -> str:
        return self.record.title


class Outcome(str, Enum):
    """Round outcome."""

    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


@dataclass
class RoundState:
    """State of one round, owned by a single RoundEngine.

    ``history`` holds the newest entry first.
    """

    answer: AnimeRecord
    max_guesses: int
    history: list[GuessEntry] = field(default_factory=list)
    outcome: Outcome = Outcome.ONGOING

    @property
    def answer_title(self) -> str:
        return self.answer.title

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.ONGOING

    @property
    def guess_count(self) -> int:
        """Guesses made by the player; the give-up reveal is not counted."""
        return sum(1 for entry in self.history if not entry.is_reveal)

    @property
    def guesses_left(self) -> int:
        return max(0, self.max_guesses - len(self.history))

    @property
    def guessed_titles(self) -> set[str]:
        return {entry.title for entry in self.history}


class GuessStatus(str, Enum):
    """Why a guess was accepted or ignored."""

    ACCEPTED = "accepted"
    UNKNOWN_TITLE = "unknown_title"
    DUPLICATE_GUESS = "duplicate_guess"
    ROUND_OVER = "round_over"


@dataclass(frozen=True)
class GuessResult:
    """Result of ``RoundEngine.submit_guess``.

    A rejected guess carries no entry and leaves the round untouched.
    """

    status: GuessStatus
    won: bool = False
    entry: GuessEntry | None = None

    @property
    def accepted(self) -> bool:
        return self.status is GuessStatus.ACCEPTED


__all__ = [
    "ComparisonResult",
    "GuessEntry",
    "GuessResult",
    "GuessStatus",
    "ListComparison",
    "ListItemComparison",
    "Ordering",
    "Outcome",
    "RoundState",
    "ScalarComparison",
    "ScalarValue",
]

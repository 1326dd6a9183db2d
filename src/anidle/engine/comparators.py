"""Attribute comparators.

Three families cover every attribute: equality for categorical values,
numeric ordering for counts and scores, and set matching for studios,
producers, tags and themes. All are pure apart from the shuffle in
``compare_set``, which draws from the random source it is given.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum

from anidle.engine.models import (
    ListComparison,
    ListItemComparison,
    Ordering,
    ScalarComparison,
)
from anidle.shared.constants import GameRules


def _normalize_category(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def compare_equality(answer_value: object, guess_value: object) -> ScalarComparison:
    """Compare categorical values.

    Missing values normalize to an empty string before comparing, so two
    missing values count as equal. No direction is ever claimed.

    Example:
        >>> compare_equality("fall", "fall").ordering
        <Ordering.EQUAL: '='>
        >>> compare_equality("fall", "spring").ordering
        <Ordering.NONE: ''>
    """
    answer = _normalize_category(answer_value)
    guess = _normalize_category(guess_value)
    ordering = Ordering.EQUAL if answer == guess else Ordering.NONE
    return ScalarComparison(value=guess, ordering=ordering)


def compare_number(
    answer_value: float | None,
    guess_value: float | None,
    precision: int = GameRules.NUMBER_PRECISION,
) -> ScalarComparison:
    """Compare numbers after rounding both sides to ``precision`` decimals.

    HIGHER means the guess is above the answer. When either side is
    missing the result is NONE with an empty value.

    Example:
        >>> compare_number(12, 24)
        ScalarComparison(value=24, ordering=<Ordering.HIGHER: '>'>)
        >>> compare_number(8.123, 8.121).ordering
        <Ordering.EQUAL: '='>
    """
    if answer_value is None or guess_value is None:
        return ScalarComparison(value=None, ordering=Ordering.NONE)

    answer = round(answer_value, precision)
    guess = round(guess_value, precision)

    if guess > answer:
        ordering = Ordering.HIGHER
    elif guess < answer:
        ordering = Ordering.LOWER
    else:
        ordering = Ordering.EQUAL
    return ScalarComparison(value=guess, ordering=ordering)


def compare_set(
    answer_items: Iterable[str],
    guess_items: Iterable[str],
    rng: random.Random | None = None,
    limit: int = GameRules.LIST_DISPLAY_LIMIT,
) -> ListComparison:
    """Compare the guessed set against the answer's set.

    The guessed members are shuffled, then matched members are moved ahead
    of unmatched ones (keeping their shuffled order), and the result is cut
    to ``limit`` entries. Matches therefore survive truncation first.

    Args:
        answer_items: Members of the answer's set
        guess_items: Members of the guessed record's set
        rng: Random source for the shuffle
        limit: Maximum number of entries returned

    Returns:
        Items of the guessed set with their match flag
    """
    targets = set(answer_items)
    shuffled = list(guess_items)
    (rng or random).shuffle(shuffled)

    matched = [item for item in shuffled if item in targets]
    unmatched = [item for item in shuffled if item not in targets]

    return tuple(
        ListItemComparison(item=item, matched=item in targets)
        for item in (matched + unmatched)[:limit]
    )


__all__ = ["compare_equality", "compare_number", "compare_set"]

"""Round engine state machine.

A round moves from ONGOING to either WON or LOST; ``start_round`` resets
to a fresh ONGOING round from any state. The engine owns its RoundState
and is driven synchronously by a single front end.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from anidle.catalog.catalog import Catalog
from anidle.catalog.models import AnimeRecord
from anidle.config.models.game_settings import GameSettings
from anidle.engine.attributes import AttributeSpec, compare_records, resolve_attributes
from anidle.engine.models import (
    GuessEntry,
    GuessResult,
    GuessStatus,
    Outcome,
    RoundState,
)
from anidle.shared.constants import GameRules
from anidle.shared.errors import create_unknown_title_error
from anidle.shared.logging import log_validation_error

logger = logging.getLogger(__name__)


class RoundEngine:
    """Runs rounds of the guessing game over one catalog.

    A first round is started on construction, so ``state`` is always
    available.

    Args:
        catalog: Shared, read-only catalog
        rng: Random source for answer choice and list shuffles
            (defaults to the catalog's)
        max_guesses: Guess budget per round
        attributes: Attributes compared for each guess, in display order
        list_display_limit: Maximum entries kept per list attribute
    """

    def __init__(
        self,
        catalog: Catalog,
        rng: random.Random | None = None,
        max_guesses: int = GameRules.MAX_GUESSES,
        attributes: Iterable[AttributeSpec] | None = None,
        list_display_limit: int = GameRules.LIST_DISPLAY_LIMIT,
    ) -> None:
        if max_guesses < 1:
            msg = f"max_guesses must be >= 1, got {max_guesses}"
            raise ValueError(msg)

        self.catalog = catalog
        self.rng = rng or catalog.rng
        self.max_guesses = max_guesses
        self.attributes = tuple(attributes) if attributes is not None else resolve_attributes()
        self.list_display_limit = list_display_limit

        self._state = self.start_round()

    @classmethod
    def from_settings(
        cls,
        catalog: Catalog,
        settings: GameSettings,
        rng: random.Random | None = None,
    ) -> RoundEngine:
        """Build an engine from the ``[game]`` configuration section."""
        if rng is None and settings.seed is not None:
            rng = random.Random(settings.seed)
        return cls(
            catalog,
            rng=rng,
            max_guesses=settings.max_guesses,
            attributes=resolve_attributes(settings.attributes),
            list_display_limit=settings.list_display_limit,
        )

    @property
    def state(self) -> RoundState:
        return self._state

    def start_round(self, answer_title: str | None = None) -> RoundState:
        """Start a new round, discarding the current one.

        Args:
            answer_title: Use this record as the answer instead of a
                random pick

        Raises:
            DomainError: UNKNOWN_TITLE when answer_title is not in the catalog
        """
        if answer_title is None:
            answer = self.catalog.pick_random_answer(self.rng)
        else:
            answer = self.catalog.find_by_title(answer_title)
            if answer is None:
                raise create_unknown_title_error(answer_title, operation="start_round")

        self._state = RoundState(answer=answer, max_guesses=self.max_guesses)
        logger.debug("Round started with %d titles in catalog", len(self.catalog))
        return self._state

    def available_titles(self) -> list[str]:
        """Catalog titles that have not been guessed this round."""
        guessed = self._state.guessed_titles
        return [title for title in self.catalog.titles() if title not in guessed]

    def submit_guess(self, title: str) -> GuessResult:
        """Submit a guess by title.

        Guesses after the round has ended, unknown titles and repeated
        titles are ignored and reported through the result status.

        Returns:
            GuessResult whose ``won`` is True only for the winning guess
        """
        state = self._state

        if state.is_over:
            log_validation_error(logger, "title", title, "round is over")
            return GuessResult(GuessStatus.ROUND_OVER)

        record = self.catalog.find_by_title(title)
        if record is None:
            log_validation_error(logger, "title", title, "not in catalog")
            return GuessResult(GuessStatus.UNKNOWN_TITLE)

        if title in state.guessed_titles:
            log_validation_error(logger, "title", title, "already guessed")
            return GuessResult(GuessStatus.DUPLICATE_GUESS)

        return self._record_guess(record)

    def give_up(self) -> None:
        """End the round as lost and reveal the answer.

        The outcome is set to LOST before the reveal is recorded, so the
        reveal never turns the round into a win. Does nothing once the
        round is over.
        """
        state = self._state
        if state.is_over:
            return

        state.outcome = Outcome.LOST
        self._record_guess(state.answer, is_reveal=True)
        logger.info("Player gave up after %d guesses", state.guess_count)

    def _record_guess(self, record: AnimeRecord, *, is_reveal: bool = False) -> GuessResult:
        state = self._state
        comparison = compare_records(
            state.answer,
            record,
            self.attributes,
            rng=self.rng,
            limit=self.list_display_limit,
        )
        entry = GuessEntry(record=record, comparison=comparison, is_reveal=is_reveal)
        state.history.insert(0, entry)
        logger.debug("Recorded guess %d/%d", len(state.history), state.max_guesses)

        won = False
        if state.outcome is Outcome.ONGOING:
            if record.title == state.answer.title:
                state.outcome = Outcome.WON
                won = True
                logger.info("Round won in %d guesses", len(state.history))
            elif len(state.history) >= state.max_guesses:
                state.outcome = Outcome.LOST
                logger.info("Round lost: guess budget of %d used", state.max_guesses)

        return GuessResult(GuessStatus.ACCEPTED, won=won, entry=entry)


__all__ = ["RoundEngine"]

"""Game configuration models.

Guess budget, list display limit, compared attributes and the optional
random seed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from anidle.shared.constants import AttributeNames, GameRules


class GameSettings(BaseModel):
    """Round rules and board layout."""

    max_guesses: int = Field(
        default=GameRules.MAX_GUESSES,
        ge=1,
        description="Number of guesses before the round is lost",
    )
    list_display_limit: int = Field(
        default=GameRules.LIST_DISPLAY_LIMIT,
        ge=1,
        description="Maximum number of items shown per list attribute",
    )
    attributes: list[str] = Field(
        default_factory=lambda: list(AttributeNames.DEFAULT),
        description="Attributes compared for every guess, in display order",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random source (None for a fresh one)",
    )

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, value: list[str]) -> list[str]:
        """Reject empty or repeated attribute lists.

        Names themselves are checked against the attribute registry when
        the engine is built.
        """
        if not value:
            msg = "At least one attribute must be compared"
            raise ValueError(msg)
        if len(set(value)) != len(value):
            msg = f"Attributes must not repeat: {value}"
            raise ValueError(msg)
        return value


__all__ = ["GameSettings"]

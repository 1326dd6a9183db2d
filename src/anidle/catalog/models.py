"""Catalog record model.

``AnimeRecord`` is the immutable entry the round engine compares. Every
attribute except the title may be missing in source data, so each one is
optional and list attributes default to an empty tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Season(str, Enum):
    """Broadcast season of an anime."""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"

    @classmethod
    def parse(cls, value: str | None) -> Season | None:
        """Parse a season name, case-insensitively.

        Source data uses ``UNDEFINED`` for an unknown season; it and any
        other unrecognized name map to None.

        Example:
            >>> Season.parse("SPRING")
            <Season.SPRING: 'spring'>
            >>> Season.parse("UNDEFINED") is None
            True
        """
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class AnimeRecord:
    """One catalog entry.

    Attributes:
        title: Unique key of the record within its catalog
        episodes: Episode count
        score: Aggregated user score
        year: Premiere year
        season: Premiere season
        source: Original medium (e.g. "manga")
        media_type: Release format (e.g. "TV", "MOVIE")
        status: Airing status (e.g. "FINISHED")
        studios: Animation studios
        producers: Producers
        tags: Genres and tags
        themes: Themes

    Example:
        >>> record = AnimeRecord(title="Frieren", year=2023, studios=("Madhouse",))
        >>> record.episodes is None
        True
    """

    title: str
    episodes: int | None = None
    score: float | None = None
    year: int | None = None
    season: Season | None = None
    source: str | None = None
    media_type: str | None = None
    status: str | None = None
    studios: tuple[str, ...] = ()
    producers: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    themes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.episodes is not None and self.episodes < 0:
            msg = f"episodes must be >= 0, got {self.episodes}"
            raise ValueError(msg)

        # Sets are stored as ordered tuples of distinct members
        for name in ("studios", "producers", "tags", "themes"):
            value = getattr(self, name)
            object.__setattr__(self, name, tuple(dict.fromkeys(value)))


__all__ = ["AnimeRecord", "Season"]

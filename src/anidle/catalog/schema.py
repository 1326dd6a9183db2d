"""Catalog file schema.

Pydantic models validating catalog entries at the file boundary. The
layout follows anime-offline-database: nested ``animeSeason`` and
``score`` objects, camelCase keys, and fields that may be missing or null.
Unknown keys are ignored so richer dumps load unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from anidle.catalog.models import AnimeRecord, Season


class _EntryModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AnimeSeasonEntry(_EntryModel):
    """Premiere season and year."""

    season: str | None = None
    year: int | None = None


class ScoreEntry(_EntryModel):
    """Aggregated scores; the median is the one compared."""

    arithmetic_geometric_mean: float | None = Field(None, alias="arithmeticGeometricMean")
    arithmetic_mean: float | None = Field(None, alias="arithmeticMean")
    median: float | None = None


class CatalogEntry(_EntryModel):
    """One raw catalog entry.

    Example:
        >>> entry = CatalogEntry.model_validate(
        ...     {"title": "Frieren", "animeSeason": {"season": "FALL", "year": 2023}}
        ... )
        >>> entry.to_record().season
        <Season.FALL: 'fall'>
    """

    title: str | None = None
    media_type: str | None = Field(None, alias="type")
    episodes: int | None = Field(None, ge=0)
    status: str | None = None
    source: str | None = None
    anime_season: AnimeSeasonEntry | None = Field(None, alias="animeSeason")
    score: ScoreEntry | float | None = None
    studios: list[str] = Field(default_factory=list)
    producers: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    themes: list[str] = Field(default_factory=list)

    @field_validator("studios", "producers", "tags", "themes", mode="before")
    @classmethod
    def none_to_empty(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def median_score(self) -> float | None:
        if isinstance(self.score, ScoreEntry):
            return self.score.median
        return self.score

    def to_record(self) -> AnimeRecord:
        """Convert a titled entry into an immutable AnimeRecord."""
        season = self.anime_season.season if self.anime_season else None
        year = self.anime_season.year if self.anime_season else None
        return AnimeRecord(
            title=self.title,
            episodes=self.episodes,
            score=self.median_score,
            year=year,
            season=Season.parse(season),
            source=self.source,
            media_type=self.media_type,
            status=self.status,
            studios=tuple(self.studios),
            producers=tuple(self.producers),
            tags=tuple(self.tags),
            themes=tuple(self.themes),
        )


class CatalogFile(_EntryModel):
    """Top-level catalog document with a ``data`` list."""

    data: list[CatalogEntry]


__all__ = ["AnimeSeasonEntry", "CatalogEntry", "CatalogFile", "ScoreEntry"]

"""
Pytest configuration and shared fixtures for Anidle tests.

Fixtures build small catalogs and engines with seeded random sources so
answer picks and list shuffles are deterministic.
"""

from __future__ import annotations

import json
import logging
import os
import random
from collections.abc import Generator
from pathlib import Path

import pytest

from anidle.catalog import AnimeRecord, Catalog, Season
from anidle.cli.common.context import clear_cli_context
from anidle.engine import RoundEngine


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def record_a() -> AnimeRecord:
    return AnimeRecord(
        title="A",
        episodes=12,
        score=7.5,
        year=2010,
        season=Season.SPRING,
        source="manga",
        studios=("X", "Y"),
        producers=("P1",),
        tags=("action", "drama"),
    )


@pytest.fixture
def record_b() -> AnimeRecord:
    return AnimeRecord(
        title="B",
        episodes=24,
        score=8.25,
        year=2015,
        season=Season.FALL,
        source="original",
        studios=("Y", "Z", "W"),
        producers=("P2",),
        tags=("drama", "romance", "comedy"),
    )


@pytest.fixture
def small_catalog(record_a: AnimeRecord, record_b: AnimeRecord, rng: random.Random) -> Catalog:
    """Two-record catalog: A (2010, 12 eps) and B (2015, 24 eps)."""
    return Catalog([record_a, record_b], rng=rng)


@pytest.fixture
def many_catalog(rng: random.Random) -> Catalog:
    """Catalog of 30 minimal records titled T00..T29."""
    records = [AnimeRecord(title=f"T{i:02d}", year=2000 + i) for i in range(30)]
    return Catalog(records, rng=rng)


@pytest.fixture
def engine(small_catalog: Catalog) -> RoundEngine:
    """Engine over the small catalog with "A" as the answer."""
    engine = RoundEngine(small_catalog)
    engine.start_round("A")
    return engine


@pytest.fixture
def catalog_entries() -> list[dict]:
    """Raw anime-offline-database style entries."""
    return [
        {
            "title": "Alpha",
            "type": "TV",
            "episodes": 12,
            "status": "FINISHED",
            "animeSeason": {"season": "SPRING", "year": 2010},
            "score": {"arithmeticGeometricMean": 7.4, "arithmeticMean": 7.5, "median": 7.55},
            "studios": ["X"],
            "producers": ["P1", "P2"],
            "tags": ["action"],
            "sources": ["https://example.org/anime/1"],
        },
        {
            "title": "Beta",
            "type": "MOVIE",
            "episodes": 1,
            "status": "FINISHED",
            "animeSeason": {"season": "UNDEFINED", "year": None},
            "score": None,
            "studios": [],
            "producers": None,
            "tags": ["drama"],
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_entries: list[dict]) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"data": catalog_entries}), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_cli_context() -> Generator[None, None, None]:
    clear_cli_context()
    yield
    clear_cli_context()


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test outside the repository so no local config is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in list(os.environ):
        if key.startswith("ANIDLE_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_anidle_logger() -> Generator[None, None, None]:
    """Undo ``setup_logging`` so caplog sees records from every test."""
    yield
    logger = logging.getLogger("anidle")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

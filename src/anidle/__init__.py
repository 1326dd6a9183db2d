"""
Anidle - Wordle-style anime guessing game

Guess an anime from a catalog; every guess reveals how its year, season,
episodes, score, studios, producers and tags compare with the answer.
"""

__version__ = "0.1.0"

from .catalog import AnimeRecord, Catalog, load_catalog
from .engine import GuessStatus, Ordering, Outcome, RoundEngine

__all__ = [
    "AnimeRecord",
    "Catalog",
    "GuessStatus",
    "Ordering",
    "Outcome",
    "RoundEngine",
    "load_catalog",
]

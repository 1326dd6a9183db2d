"""Configuration domain models."""

from __future__ import annotations

from .app_settings import CatalogSettings, LoggingSettings
from .game_settings import GameSettings
from .settings import Settings

__all__ = [
    "CatalogSettings",
    "GameSettings",
    "LoggingSettings",
    "Settings",
]

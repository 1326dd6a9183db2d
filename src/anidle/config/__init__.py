"""Anidle configuration package."""

from __future__ import annotations

from .loader import default_config_paths, load_settings
from .models import CatalogSettings, GameSettings, LoggingSettings, Settings

__all__ = [
    "CatalogSettings",
    "GameSettings",
    "LoggingSettings",
    "Settings",
    "default_config_paths",
    "load_settings",
]

"""Anidle Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from anidle.config.models.app_settings import CatalogSettings, LoggingSettings
from anidle.config.models.game_settings import GameSettings


class Settings(BaseSettings):
    """Settings facade providing unified configuration access.

    Values come from a TOML file (see ``from_toml_file``) and can be
    overridden by environment variables such as
    ``ANIDLE_GAME__MAX_GUESSES=10``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIDLE_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    game: GameSettings = Field(default_factory=GameSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment first, then file values passed as init kwargs
        return env_settings, init_settings, file_secret_settings

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file.

        Environment variables override the values read from the file.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with file_path.open("w", encoding="utf-8") as f:
            toml.dump(self.model_dump(mode="json", exclude_none=True), f)


__all__ = ["Settings"]

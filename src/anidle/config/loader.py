"""Settings loader.

Finds the TOML configuration file, loads it into ``Settings`` and wraps
every failure in an ApplicationError with CONFIG_ERROR.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import ValidationError

from anidle.config.models.settings import Settings
from anidle.shared.constants import FileSystem
from anidle.shared.errors import ApplicationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)


def default_config_paths() -> list[Path]:
    """Locations searched for a configuration file, in priority order."""
    return [
        Path("config") / FileSystem.CONFIG_FILE,
        Path(FileSystem.CONFIG_FILE),
        Path.home() / FileSystem.HOME_DIR / "config.toml",
    ]


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional path to a TOML file. If None, the default
            locations are tried before falling back to environment
            variables and defaults.

    Returns:
        Settings instance loaded from the first available source

    Raises:
        ApplicationError: If the file is missing, unreadable or invalid
    """
    if config_path is not None:
        return _load_from_file(Path(config_path))

    for candidate in default_config_paths():
        if candidate.exists():
            return _load_from_file(candidate)

    try:
        return Settings()
    except ValidationError as e:
        raise ApplicationError(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Invalid configuration in environment: {e}",
            context=ErrorContext(operation="load_settings"),
            original_error=e,
        ) from e


def _load_from_file(path: Path) -> Settings:
    try:
        settings = Settings.from_toml_file(path)
    except FileNotFoundError as e:
        raise ApplicationError(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Configuration file not found: {path}",
            context=ErrorContext(file_path=str(path), operation="load_settings"),
            original_error=e,
        ) from e
    except (toml.TomlDecodeError, OSError) as e:
        raise ApplicationError(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Failed to read configuration file: {e}",
            context=ErrorContext(file_path=str(path), operation="load_settings"),
            original_error=e,
        ) from e
    except ValidationError as e:
        raise ApplicationError(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Invalid configuration: {e}",
            context=ErrorContext(file_path=str(path), operation="load_settings"),
            original_error=e,
        ) from e

    logger.debug("Loaded configuration from %s", path)
    return settings


__all__ = [
    "default_config_paths",
    "load_settings",
]

"""CLI runtime setup.

Loads configuration, configures logging and builds the catalog and round
engine a command works with.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from anidle.catalog import Catalog, load_catalog
from anidle.cli.common.context import get_cli_context
from anidle.config import Settings, load_settings
from anidle.engine import RoundEngine
from anidle.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class GameRuntime:
    """Everything a command needs to run."""

    settings: Settings
    catalog: Catalog
    engine: RoundEngine


def build_runtime(
    catalog_path: Path | None = None,
    seed: int | None = None,
) -> GameRuntime:
    """Build settings, logging, catalog and engine for a command.

    Command line values take precedence over configuration.

    Args:
        catalog_path: Catalog file given on the command line
        seed: Random seed given on the command line
    """
    context = get_cli_context()
    settings = load_settings(context.config_path)

    level = context.log_level.value if context.log_level else settings.logging.level
    setup_logging(
        level=level,
        log_file=settings.logging.file,
        console_output=settings.logging.console_output,
    )

    if seed is None:
        seed = settings.game.seed
    rng = random.Random(seed)

    catalog = load_catalog(catalog_path or settings.catalog.path, rng=rng)
    engine = RoundEngine.from_settings(catalog, settings.game, rng=rng)
    logger.debug("Runtime ready: %d titles, max %d guesses", len(catalog), engine.max_guesses)

    return GameRuntime(settings=settings, catalog=catalog, engine=engine)


__all__ = ["GameRuntime", "build_runtime"]

"""Immutable anime catalog with title lookup."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator

from anidle.catalog.models import AnimeRecord
from anidle.shared.errors import (
    create_duplicate_title_error,
    create_empty_catalog_error,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered, read-only collection of anime records keyed by title.

    The title index is built once at construction. A catalog must hold at
    least one record and every title must be unique; both are checked
    here so the round engine can rely on them.

    Args:
        records: Records in catalog order
        rng: Random source used by ``pick_random_answer``

    Raises:
        DomainError: EMPTY_CATALOG or DUPLICATE_TITLE
    """

    def __init__(
        self,
        records: Iterable[AnimeRecord],
        rng: random.Random | None = None,
    ) -> None:
        self._records: tuple[AnimeRecord, ...] = tuple(records)
        if not self._records:
            raise create_empty_catalog_error(operation="build_catalog")

        self._index: dict[str, AnimeRecord] = {}
        for record in self._records:
            if record.title in self._index:
                raise create_duplicate_title_error(record.title, operation="build_catalog")
            self._index[record.title] = record

        self._rng = rng or random.Random()
        logger.debug("Catalog built with %d records", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AnimeRecord]:
        return iter(self._records)

    def __contains__(self, title: object) -> bool:
        return title in self._index

    @property
    def rng(self) -> random.Random:
        return self._rng

    def titles(self) -> list[str]:
        """All titles in catalog order."""
        return [record.title for record in self._records]

    def find_by_title(self, title: str) -> AnimeRecord | None:
        """Exact, case-sensitive lookup; None when the title is unknown."""
        return self._index.get(title)

    def pick_random_answer(self, rng: random.Random | None = None) -> AnimeRecord:
        """Pick a record uniformly at random.

        Args:
            rng: Random source to draw from instead of the catalog's own
        """
        # Unreachable for catalogs built through __init__
        if not self._records:
            raise create_empty_catalog_error(operation="pick_random_answer")
        return (rng or self._rng).choice(self._records)


__all__ = ["Catalog"]

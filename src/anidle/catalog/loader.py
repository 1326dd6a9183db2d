"""Catalog loading from JSON files.

Accepts either a bare list of entries or an anime-offline-database style
document (``{"data": [...]}``). Entries are validated with the models in
``anidle.catalog.schema`` and converted to ``AnimeRecord`` values.
"""

from __future__ import annotations

import logging
import random
import time
from importlib import resources
from pathlib import Path
from typing import Any

import orjson
from pydantic import TypeAdapter, ValidationError

from anidle.catalog.catalog import Catalog
from anidle.catalog.models import AnimeRecord
from anidle.catalog.schema import CatalogEntry, CatalogFile
from anidle.shared.constants import FileSystem
from anidle.shared.errors import (
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    create_file_not_found_error,
)
from anidle.shared.logging import (
    log_operation_start,
    log_operation_success,
    log_validation_error,
)

logger = logging.getLogger(__name__)

_ENTRY_LIST = TypeAdapter(list[CatalogEntry])


def parse_catalog_data(data: Any, source: str = "<memory>") -> list[AnimeRecord]:
    """Validate decoded catalog JSON and convert it to records.

    Args:
        data: Decoded JSON (list of entries or ``{"data": [...]}``)
        source: Name of the data source, used in error context

    Returns:
        Records in source order; entries without a title are skipped

    Raises:
        DomainError: INVALID_CATALOG if the data does not match the schema
    """
    try:
        if isinstance(data, dict):
            entries = CatalogFile.model_validate(data).data
        else:
            entries = _ENTRY_LIST.validate_python(data)
    except ValidationError as e:
        raise DomainError(
            code=ErrorCode.INVALID_CATALOG,
            message=f"Catalog does not match the expected schema ({e.error_count()} errors)",
            context=ErrorContext(
                file_path=source,
                operation="parse_catalog",
                additional_data={"error_count": e.error_count()},
            ),
            original_error=e,
        ) from e

    records = []
    for position, entry in enumerate(entries):
        if not entry.title:
            log_validation_error(
                logger,
                "title",
                entry.title,
                "entry has no title",
                {"source": source, "position": position},
            )
            continue
        records.append(entry.to_record())

    skipped = len(entries) - len(records)
    if skipped:
        logger.warning("Skipped %d untitled entries in %s", skipped, source)
    return records


def read_catalog_file(path: str | Path) -> list[AnimeRecord]:
    """Read and parse a JSON catalog file.

    Raises:
        InfrastructureError: FILE_NOT_FOUND or FILE_READ_ERROR
        DomainError: INVALID_CATALOG for malformed JSON or schema mismatch
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise create_file_not_found_error(str(path), "read_catalog", e) from e
    except OSError as e:
        raise InfrastructureError(
            code=ErrorCode.FILE_READ_ERROR,
            message=f"Failed to read catalog file: {e}",
            context=ErrorContext(file_path=str(path), operation="read_catalog"),
            original_error=e,
        ) from e

    return _decode(raw, str(path))


def read_bundled_catalog() -> list[AnimeRecord]:
    """Read the sample catalog shipped with the package."""
    resource = resources.files(FileSystem.CATALOG_PACKAGE).joinpath(FileSystem.SAMPLE_CATALOG)
    return _decode(resource.read_bytes(), FileSystem.SAMPLE_CATALOG)


def _decode(raw: bytes, source: str) -> list[AnimeRecord]:
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise DomainError(
            code=ErrorCode.INVALID_CATALOG,
            message=f"Catalog is not valid JSON: {e}",
            context=ErrorContext(file_path=source, operation="parse_catalog"),
            original_error=e,
        ) from e
    return parse_catalog_data(data, source)


def load_catalog(
    path: str | Path | None = None,
    rng: random.Random | None = None,
) -> Catalog:
    """Load a catalog from ``path``, or the bundled sample when path is None.

    Args:
        path: Optional JSON catalog file
        rng: Random source handed to the catalog

    Returns:
        The constructed Catalog
    """
    source = str(path) if path is not None else FileSystem.SAMPLE_CATALOG
    log_operation_start(logger, "load_catalog", {"source": source})
    started = time.perf_counter()

    records = read_catalog_file(path) if path is not None else read_bundled_catalog()
    catalog = Catalog(records, rng=rng)

    log_operation_success(
        logger,
        "load_catalog",
        (time.perf_counter() - started) * 1000,
        result_info={"records": len(catalog)},
        context={"source": source},
    )
    return catalog


__all__ = [
    "load_catalog",
    "parse_catalog_data",
    "read_bundled_catalog",
    "read_catalog_file",
]

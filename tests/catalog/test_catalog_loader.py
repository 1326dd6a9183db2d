"""Tests for catalog JSON loading."""

import json
import logging
import random

import pytest

from anidle.catalog import Season, load_catalog, parse_catalog_data, read_catalog_file
from anidle.catalog.loader import read_bundled_catalog
from anidle.catalog.schema import CatalogEntry
from anidle.shared.errors import DomainError, ErrorCode, InfrastructureError


class TestParseCatalogData:
    def test_document_with_data_key(self, catalog_entries):
        records = parse_catalog_data({"data": catalog_entries})

        assert [record.title for record in records] == ["Alpha", "Beta"]

    def test_bare_list(self, catalog_entries):
        records = parse_catalog_data(catalog_entries)

        assert len(records) == 2

    def test_entry_conversion(self, catalog_entries):
        alpha, beta = parse_catalog_data(catalog_entries)

        assert alpha.media_type == "TV"
        assert alpha.episodes == 12
        assert alpha.year == 2010
        assert alpha.season is Season.SPRING
        assert alpha.score == 7.55
        assert alpha.studios == ("X",)
        assert alpha.producers == ("P1", "P2")
        assert alpha.tags == ("action",)

    def test_missing_values(self, catalog_entries):
        beta = parse_catalog_data(catalog_entries)[1]

        assert beta.season is None
        assert beta.year is None
        assert beta.score is None
        assert beta.studios == ()
        assert beta.producers == ()

    def test_plain_number_score(self):
        records = parse_catalog_data([{"title": "Flat", "score": 6.5}])

        assert records[0].score == 6.5

    def test_unknown_keys_ignored(self):
        records = parse_catalog_data([{"title": "Extra", "picture": "x.png", "synonyms": []}])

        assert records[0].title == "Extra"

    def test_untitled_entries_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="anidle.catalog.loader"):
            records = parse_catalog_data(
                [{"title": "A"}, {"episodes": 3}, {"title": "", "year": 2001}, {"title": "B"}],
            )

        assert [record.title for record in records] == ["A", "B"]
        assert "Skipped 2 untitled entries" in caplog.text

    @pytest.mark.parametrize(
        "data",
        [
            [{"title": ["Listed"]}],
            [{"title": "Neg", "episodes": -2}],
            {"entries": []},
            "not a catalog",
        ],
    )
    def test_invalid_data(self, data):
        with pytest.raises(DomainError) as exc_info:
            parse_catalog_data(data, source="test.json")

        assert exc_info.value.code == ErrorCode.INVALID_CATALOG
        assert exc_info.value.context.file_path == "test.json"

    def test_schema_example(self):
        entry = CatalogEntry.model_validate(
            {"title": "Frieren", "animeSeason": {"season": "FALL", "year": 2023}},
        )

        assert entry.to_record().season is Season.FALL
        assert entry.median_score is None


class TestReadCatalogFile:
    def test_reads_file(self, catalog_file):
        records = read_catalog_file(catalog_file)

        assert [record.title for record in records] == ["Alpha", "Beta"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InfrastructureError) as exc_info:
            read_catalog_file(tmp_path / "missing.json")

        assert exc_info.value.code == ErrorCode.FILE_NOT_FOUND

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DomainError) as exc_info:
            read_catalog_file(path)

        assert exc_info.value.code == ErrorCode.INVALID_CATALOG


class TestLoadCatalog:
    def test_load_from_file(self, catalog_file):
        catalog = load_catalog(catalog_file, rng=random.Random(3))

        assert catalog.titles() == ["Alpha", "Beta"]
        assert catalog.pick_random_answer().title in {"Alpha", "Beta"}

    def test_load_bundled_sample(self):
        catalog = load_catalog()

        assert len(catalog) >= 10
        assert "Sousou no Frieren" in catalog

    def test_bundled_sample_titles_are_unique(self):
        titles = [record.title for record in read_bundled_catalog()]

        assert len(titles) == len(set(titles))

    def test_empty_file_catalog(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"data": []}), encoding="utf-8")

        with pytest.raises(DomainError) as exc_info:
            load_catalog(path)

        assert exc_info.value.code == ErrorCode.EMPTY_CATALOG

    def test_file_without_titled_entries(self, tmp_path):
        path = tmp_path / "untitled.json"
        path.write_text(json.dumps([{"episodes": 1}, {"title": None}]), encoding="utf-8")

        with pytest.raises(DomainError) as exc_info:
            load_catalog(path)

        assert exc_info.value.code == ErrorCode.EMPTY_CATALOG

    def test_duplicate_titles_in_file(self, tmp_path):
        path = tmp_path / "dup.json"
        path.write_text(json.dumps([{"title": "Twice"}, {"title": "Twice"}]), encoding="utf-8")

        with pytest.raises(DomainError) as exc_info:
            load_catalog(path)

        assert exc_info.value.code == ErrorCode.DUPLICATE_TITLE

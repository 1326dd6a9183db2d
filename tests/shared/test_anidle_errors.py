"""Tests for the Anidle error hierarchy."""

from enum import Enum
from pathlib import Path

import pytest

from anidle.shared.errors import (
    AnidleError,
    ApplicationError,
    CliError,
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    create_cli_error,
    create_duplicate_title_error,
    create_empty_catalog_error,
    create_file_not_found_error,
    create_unknown_title_error,
)


class _Color(Enum):
    RED = "red"


class TestErrorContext:
    def test_coerces_additional_data(self):
        context = ErrorContext(
            additional_data={
                "path": Path("a/b.json"),
                "color": _Color.RED,
                "count": 3,
            },
        )

        assert context.additional_data == {
            "path": str(Path("a/b.json")),
            "color": "red",
            "count": 3,
        }

    def test_rejects_non_primitive_values(self):
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"items": [1, 2]})

    def test_safe_dict(self):
        context = ErrorContext(file_path="/catalog.json", operation="load")

        assert context.safe_dict() == {
            "file_path": "/catalog.json",
            "operation": "load",
            "additional_data": {},
        }


class TestAnidleError:
    def test_str_and_to_dict(self):
        cause = ValueError("boom")
        error = DomainError(
            ErrorCode.INVALID_CATALOG,
            "bad catalog",
            ErrorContext(operation="parse_catalog"),
            cause,
        )

        assert str(error) == "INVALID_CATALOG: bad catalog"
        assert error.to_dict() == {
            "code": "INVALID_CATALOG",
            "message": "bad catalog",
            "context": {"operation": "parse_catalog", "additional_data": {}},
            "original_error": "boom",
        }

    def test_hierarchy(self):
        assert issubclass(DomainError, AnidleError)
        assert issubclass(InfrastructureError, AnidleError)
        assert issubclass(CliError, ApplicationError)


class TestFactories:
    def test_empty_catalog(self):
        error = create_empty_catalog_error(operation="build_catalog")

        assert isinstance(error, DomainError)
        assert error.code == ErrorCode.EMPTY_CATALOG
        assert error.context.operation == "build_catalog"

    def test_duplicate_title(self):
        error = create_duplicate_title_error("Twice")

        assert error.code == ErrorCode.DUPLICATE_TITLE
        assert "Twice" in error.message

    def test_unknown_title(self):
        error = create_unknown_title_error("Z", operation="compare")

        assert error.code == ErrorCode.UNKNOWN_TITLE
        assert error.context.additional_data == {"title": "Z"}

    def test_file_not_found(self):
        cause = FileNotFoundError("x")
        error = create_file_not_found_error("/x.json", "read_catalog", cause)

        assert isinstance(error, InfrastructureError)
        assert error.context.file_path == "/x.json"
        assert error.original_error is cause

    def test_cli_error(self):
        error = create_cli_error("failed", command="titles", exit_code=2)

        assert error.code == ErrorCode.CLI_UNEXPECTED_ERROR
        assert error.command == "titles"
        assert error.exit_code == 2

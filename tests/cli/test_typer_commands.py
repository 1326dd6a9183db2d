"""End-to-end tests of the Typer application."""

import json

import pytest
from typer.testing import CliRunner

from anidle.cli.common.context import LogLevel, get_cli_context
from anidle.cli.typer_app import app, main_callback


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_main_callback_sets_context(tmp_path):
    main_callback(log_level=LogLevel.DEBUG, config_path=tmp_path / "a.toml", version=False)

    context = get_cli_context()
    assert context.log_level == LogLevel.DEBUG
    assert context.config_path == tmp_path / "a.toml"


def test_version(runner):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "Anidle v0.1.0" in result.output


def test_help_lists_commands(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("play", "titles", "compare"):
        assert command in result.output


class TestTitlesCommand:
    def test_json_output_with_bundled_catalog(self, runner):
        result = runner.invoke(app, ["titles", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["success"] is True
        assert payload["command"] == "titles"
        assert payload["data"]["count"] == len(payload["data"]["titles"])
        assert payload["data"]["titles"][0] == "Sousou no Frieren"

    def test_catalog_file(self, runner, catalog_file):
        result = runner.invoke(app, ["titles", "--catalog", str(catalog_file)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Alpha", "Beta"]

    def test_invalid_catalog_file(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")

        result = runner.invoke(
            app,
            ["--log-level", "CRITICAL", "titles", "--catalog", str(path), "--json"],
        )

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["success"] is False
        assert payload["data"]["error_code"] == "INVALID_CATALOG"


class TestCompareCommand:
    def test_json_comparison(self, runner):
        result = runner.invoke(app, ["compare", "Steins;Gate", "Sousou no Frieren", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["correct"] is False
        assert data["comparison"]["year"] == {"value": 2011, "result": "<"}
        assert data["comparison"]["episodes"] == {"value": 24, "result": "<"}
        assert data["comparison"]["score"] == {"value": 9.05, "result": "<"}
        assert data["comparison"]["season"] == {"value": "spring", "result": ""}

    def test_same_title_is_correct(self, runner):
        result = runner.invoke(app, ["compare", "Mushishi", "Mushishi", "--json"])

        data = json.loads(result.stdout)["data"]
        assert data["correct"] is True
        assert all(item["matched"] for item in data["comparison"]["tags"])

    def test_table_output(self, runner):
        result = runner.invoke(app, ["compare", "Mushishi", "Cowboy Bebop"])

        assert result.exit_code == 0
        assert "Mushishi vs. ?" in result.stdout
        assert "Episodes" in result.stdout

    def test_unknown_title(self, runner):
        result = runner.invoke(app, ["compare", "Nope", "Mushishi"])

        assert result.exit_code == 1
        assert "Error: Title not found in catalog: Nope" in result.output

    def test_unknown_title_json(self, runner):
        result = runner.invoke(
            app,
            ["--log-level", "CRITICAL", "compare", "Mushishi", "Nope", "--json"],
        )

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["errors"] == ["Title not found in catalog: Nope"]
        assert payload["data"]["error_code"] == "UNKNOWN_TITLE"


class TestPlayCommand:
    def test_win(self, runner):
        result = runner.invoke(
            app,
            ["play", "--seed", "1", "--answer", "Cowboy Bebop"],
            input="Mushishi\ncowboy bebop\n:quit\n",
        )

        assert result.exit_code == 0
        assert "You win!" in result.stdout
        assert "Guess: 2 / 20" in result.stdout

    def test_give_up(self, runner):
        result = runner.invoke(app, ["play", "--answer", "Mushishi"], input=":giveup\n")

        assert result.exit_code == 0
        assert "The answer was Mushishi." in result.stdout

    def test_unknown_answer(self, runner):
        result = runner.invoke(app, ["play", "--answer", "Nope"], input=":quit\n")

        assert result.exit_code == 1
        assert "Title not found in catalog: Nope" in result.output

    def test_config_file_limits_guesses(self, runner, tmp_path, catalog_file):
        config = tmp_path / "game.toml"
        config.write_text(
            f'[game]\nmax_guesses = 1\n\n[catalog]\npath = "{catalog_file.as_posix()}"\n',
            encoding="utf-8",
        )

        result = runner.invoke(
            app,
            ["--config", str(config), "play", "--answer", "Alpha"],
            input="Beta\n",
        )

        assert result.exit_code == 0
        assert "You lose." in result.stdout
        assert "The answer was Alpha." in result.stdout

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(app, ["--config", str(tmp_path / "none.toml"), "titles"])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    def test_log_level_is_case_insensitive(self, runner):
        result = runner.invoke(app, ["--log-level", "error", "titles", "--json"])

        assert result.exit_code == 0
        assert get_cli_context().log_level == LogLevel.ERROR

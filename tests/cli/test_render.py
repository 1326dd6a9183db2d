"""Tests for board rendering."""

import io
from urllib.parse import parse_qs, urlparse

from rich.console import Console

from anidle.cli.render import (
    build_history_table,
    comparison_to_dict,
    counter_text,
    ordering_arrow,
    render_comparison,
    search_url,
)
from anidle.engine import ListItemComparison, Ordering, ScalarComparison


def test_arrows_point_toward_answer():
    assert ordering_arrow(Ordering.HIGHER) == "↓"
    assert ordering_arrow(Ordering.LOWER) == "↑"
    assert ordering_arrow(Ordering.EQUAL) == ""
    assert ordering_arrow(Ordering.NONE) == ""


def test_render_scalar():
    assert render_comparison(ScalarComparison(24, Ordering.HIGHER)).plain == "24 ↓"
    assert render_comparison(ScalarComparison(8.5, Ordering.EQUAL)).plain == "8.5"
    assert render_comparison(ScalarComparison(None, Ordering.NONE)).plain == ""


def test_render_scalar_match_style():
    text = render_comparison(ScalarComparison("fall", Ordering.EQUAL))

    assert text.style == "green"


def test_render_list():
    items = (ListItemComparison("Y", True), ListItemComparison("Z", False))

    assert render_comparison(items).plain == "Y, Z"


def test_search_url():
    url = urlparse(search_url("Steins;Gate"))

    assert url.netloc == "www.google.com"
    assert parse_qs(url.query)["q"] == ["Steins;Gate site:myanimelist.net"]


def test_comparison_to_dict():
    data = comparison_to_dict(
        {
            "year": ScalarComparison(2015, Ordering.HIGHER),
            "studios": (ListItemComparison("Y", True),),
        },
    )

    assert data == {
        "year": {"value": 2015, "result": ">"},
        "studios": [{"value": "Y", "matched": True}],
    }


def test_counter_excludes_reveal(engine):
    engine.submit_guess("B")
    engine.give_up()

    assert counter_text(engine.state) == "Guess: 1 / 20"


def test_history_table(engine):
    engine.submit_guess("B")
    engine.submit_guess("A")

    table = build_history_table(engine.state, engine.attributes)
    console = Console(file=io.StringIO(), width=200, color_system=None)
    console.print(table)

    output = console.file.getvalue()
    assert len(table.rows) == 2
    assert table.columns[0].header == "Title"
    assert [column.header for column in table.columns[1:]] == [
        spec.label for spec in engine.attributes
    ]
    assert table.rows[0].style == "green"
    assert table.rows[1].style is None
    assert output.index("│ A ") < output.index("│ B ")

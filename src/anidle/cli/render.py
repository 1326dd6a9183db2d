"""Rich rendering of rounds and comparisons.

The engine reports raw orderings; arrows here point toward the answer,
so a guess that is too high shows a down arrow.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

from rich.table import Table
from rich.text import Text

from anidle.engine import (
    AttributeSpec,
    ComparatorKind,
    ComparisonResult,
    GuessEntry,
    Ordering,
    Outcome,
    RoundState,
    ScalarComparison,
)
from anidle.shared.constants import CLIMessages, RevealLinks

MATCH_STYLE = "green"
ARROW_STYLE = "red"

_ARROWS = {
    Ordering.HIGHER: "↓",
    Ordering.LOWER: "↑",
}


def search_url(title: str) -> str:
    """Web search link restricted to the anime database site."""
    query = urlencode({"q": f"{title} site:{RevealLinks.SEARCH_SITE}"})
    return f"{RevealLinks.SEARCH_URL}?{query}"


def ordering_arrow(ordering: Ordering) -> str:
    return _ARROWS.get(ordering, "")


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def render_comparison(result: ComparisonResult) -> Text:
    """Render one attribute cell."""
    if isinstance(result, ScalarComparison):
        text = Text(
            _format_value(result.value),
            style=MATCH_STYLE if result.is_match else "",
        )
        arrow = ordering_arrow(result.ordering)
        if arrow:
            text.append(f" {arrow}", style=ARROW_STYLE)
        return text

    text = Text()
    for index, item in enumerate(result):
        if index:
            text.append(", ")
        text.append(item.item, style=MATCH_STYLE if item.matched else "")
    return text


def _row_is_correct(entry: GuessEntry, state: RoundState, index: int) -> bool:
    # The give-up reveal renders like a correct guess
    return index == 0 and (entry.is_reveal or state.outcome is Outcome.WON)


def build_history_table(
    state: RoundState,
    attributes: Iterable[AttributeSpec],
) -> Table:
    """Table of all guesses of a round, newest first."""
    specs = tuple(attributes)
    table = Table(show_lines=True, expand=True)
    table.add_column("Title", ratio=2)
    for spec in specs:
        table.add_column(spec.label, ratio=3 if spec.kind is ComparatorKind.SET else 1)

    for index, entry in enumerate(state.history):
        correct = _row_is_correct(entry, state, index)
        title = Text(entry.title, style=f"link {search_url(entry.title)}")
        cells = [render_comparison(entry.comparison[spec.name]) for spec in specs]
        table.add_row(title, *cells, style=MATCH_STYLE if correct else None)

    return table


def counter_text(state: RoundState) -> str:
    """Guess counter, not counting the give-up reveal."""
    return CLIMessages.COUNTER.format(count=state.guess_count, max=state.max_guesses)


def comparison_to_dict(comparison: Mapping[str, ComparisonResult]) -> dict[str, Any]:
    """Plain-data form of a comparison for JSON output."""
    data: dict[str, Any] = {}
    for name, result in comparison.items():
        if isinstance(result, ScalarComparison):
            data[name] = {"value": result.value, "result": result.ordering.value}
        else:
            data[name] = [{"value": item.item, "matched": item.matched} for item in result]
    return data


__all__ = [
    "build_history_table",
    "comparison_to_dict",
    "counter_text",
    "ordering_arrow",
    "render_comparison",
    "search_url",
]

"""Attribute registry.

Which attributes a board compares is configuration: each name maps to a
record field, a display label and one of the three comparator families.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from anidle.catalog.models import AnimeRecord
from anidle.engine.comparators import compare_equality, compare_number, compare_set
from anidle.engine.models import ComparisonResult
from anidle.shared.constants import AttributeNames, GameRules
from anidle.shared.errors import DomainError, ErrorCode, ErrorContext


class ComparatorKind(str, Enum):
    """Comparator family applied to an attribute."""

    EQUALITY = "equality"
    NUMBER = "number"
    SET = "set"


@dataclass(frozen=True)
class AttributeSpec:
    """A comparable attribute of an anime record."""

    name: str
    label: str
    kind: ComparatorKind

    def extract(self, record: AnimeRecord) -> object:
        return getattr(record, self.name)


ATTRIBUTES: dict[str, AttributeSpec] = {
    spec.name: spec
    for spec in (
        AttributeSpec(AttributeNames.YEAR, "Year", ComparatorKind.NUMBER),
        AttributeSpec(AttributeNames.SEASON, "Season", ComparatorKind.EQUALITY),
        AttributeSpec(AttributeNames.EPISODES, "Episodes", ComparatorKind.NUMBER),
        AttributeSpec(AttributeNames.SCORE, "Score", ComparatorKind.NUMBER),
        AttributeSpec(AttributeNames.SOURCE, "Source", ComparatorKind.EQUALITY),
        AttributeSpec(AttributeNames.MEDIA_TYPE, "Type", ComparatorKind.EQUALITY),
        AttributeSpec(AttributeNames.STATUS, "Status", ComparatorKind.EQUALITY),
        AttributeSpec(AttributeNames.TAGS, "Tags", ComparatorKind.SET),
        AttributeSpec(AttributeNames.STUDIOS, "Studio", ComparatorKind.SET),
        AttributeSpec(AttributeNames.PRODUCERS, "Producer", ComparatorKind.SET),
        AttributeSpec(AttributeNames.THEMES, "Themes", ComparatorKind.SET),
    )
}


def resolve_attributes(names: Iterable[str] | None = None) -> tuple[AttributeSpec, ...]:
    """Look up attribute specs by name, keeping the given order.

    Args:
        names: Attribute names; None selects the default board

    Raises:
        DomainError: UNKNOWN_ATTRIBUTE for a name missing from the registry
    """
    if names is None:
        names = AttributeNames.DEFAULT

    specs = []
    for name in names:
        spec = ATTRIBUTES.get(name)
        if spec is None:
            raise DomainError(
                code=ErrorCode.UNKNOWN_ATTRIBUTE,
                message=f"Unknown attribute: {name}",
                context=ErrorContext(
                    operation="resolve_attributes",
                    additional_data={"attribute": name, "known": ", ".join(ATTRIBUTES)},
                ),
            )
        specs.append(spec)
    return tuple(specs)


def compare_attribute(
    spec: AttributeSpec,
    answer: AnimeRecord,
    guess: AnimeRecord,
    rng: random.Random | None = None,
    limit: int = GameRules.LIST_DISPLAY_LIMIT,
) -> ComparisonResult:
    """Compare one attribute of ``guess`` against ``answer``."""
    answer_value = spec.extract(answer)
    guess_value = spec.extract(guess)

    if spec.kind is ComparatorKind.NUMBER:
        return compare_number(answer_value, guess_value)
    if spec.kind is ComparatorKind.SET:
        return compare_set(answer_value, guess_value, rng=rng, limit=limit)
    return compare_equality(answer_value, guess_value)


def compare_records(
    answer: AnimeRecord,
    guess: AnimeRecord,
    attributes: Iterable[AttributeSpec] | None = None,
    rng: random.Random | None = None,
    limit: int = GameRules.LIST_DISPLAY_LIMIT,
) -> dict[str, ComparisonResult]:
    """Compare every configured attribute, in display order."""
    specs = tuple(attributes) if attributes is not None else resolve_attributes()
    return {
        spec.name: compare_attribute(spec, answer, guess, rng=rng, limit=limit)
        for spec in specs
    }


__all__ = [
    "ATTRIBUTES",
    "AttributeSpec",
    "ComparatorKind",
    "compare_attribute",
    "compare_records",
    "resolve_attributes",
]

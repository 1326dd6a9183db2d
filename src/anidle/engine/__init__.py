"""Comparison and round-state engine."""

from .attributes import (
    ATTRIBUTES,
    AttributeSpec,
    ComparatorKind,
    compare_records,
    resolve_attributes,
)
from .comparators import compare_equality, compare_number, compare_set
from .models import (
    ComparisonResult,
    GuessEntry,
    GuessResult,
    GuessStatus,
    ListItemComparison,
    Ordering,
    Outcome,
    RoundState,
    ScalarComparison,
)
from .round_engine import RoundEngine

__all__ = [
    "ATTRIBUTES",
    "AttributeSpec",
    "ComparatorKind",
    "ComparisonResult",
    "GuessEntry",
    "GuessResult",
    "GuessStatus",
    "ListItemComparison",
    "Ordering",
    "Outcome",
    "RoundEngine",
    "RoundState",
    "ScalarComparison",
    "compare_equality",
    "compare_number",
    "compare_records",
    "compare_set",
    "resolve_attributes",
]

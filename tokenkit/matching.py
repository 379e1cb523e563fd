"""Match literal values against catalog tokens."""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Optional

from .models import (
    DesignToken,
    ExtractedValue,
    MatchRationale,
    MatchResult,
    MigrationSuggestion,
    TokenCategory,
    ValueKind,
)
from .values import NUMERIC_UNIT_TYPES, ValueType, detect_value_type, numeric_magnitude

DEFAULT_SUGGESTION_LIMIT = 5
DEFAULT_MIN_SIMILARITY = 0.5

_WHITESPACE = re.compile(r"\s+")


def normalize_value(value: str) -> str:
    return _WHITESPACE.sub("", value.lower())


def find_exact_token(literal: str, tokens: Iterable[DesignToken]) -> Optional[str]:
    """Return the first token whose normalised value equals ``literal``."""
    wanted = normalize_value(literal)
    for token in tokens:
        if normalize_value(token.value) == wanted:
            return token.name
    return None


def match_value(literal: str, tokens: Iterable[DesignToken]) -> MatchResult:
    wanted = normalize_value(literal)
    for token in tokens:
        if normalize_value(token.value) == wanted:
            return MatchResult(
                query=literal,
                token_name=token.name,
                similarity=1.0,
                rationale=MatchRationale.EXACT,
                token_value=token.value,
                category=token.category,
                reason=migration_reason(1.0),
            )
    return MatchResult(
        query=literal, token_name=None, similarity=0.0, rationale=MatchRationale.NO_MATCH
    )


def similarity(query: str, candidate: str, value_type: ValueType) -> float:
    """Score how close ``candidate`` is to ``query`` for a shared value type.

    Colors are all-or-nothing: a different color is a different design
    intent. Lengths score proportionally to their relative difference, font
    weights get flat partial credit and anything else a low floor.
    """
    if value_type is ValueType.COLOR:
        return 1.0 if query.lower() == candidate.lower() else 0.0

    if value_type in NUMERIC_UNIT_TYPES:
        a = numeric_magnitude(query)
        b = numeric_magnitude(candidate)
        if a is None or b is None:
            return 0.0
        largest = max(a, b)
        if largest == 0:
            return 1.0
        return max(0.0, 1 - abs(a - b) / largest)

    if value_type is ValueType.FONT_WEIGHT:
        return 1.0 if int(query) == int(candidate) else 0.5

    return 1.0 if query == candidate else 0.3


def migration_reason(score: float) -> str:
    if score == 1:
        return "Exact match"
    if score > 0.9:
        return "Very close match"
    if score > 0.7:
        return "Close match"
    return "Similar value"


def suggest_migration(
    literal: str,
    tokens: Iterable[DesignToken],
    category: TokenCategory | str | None = None,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
    threshold: float = DEFAULT_MIN_SIMILARITY,
) -> MigrationSuggestion:
    """Rank tokens of the same value type as ``literal`` by similarity.

    Only candidates scoring at least ``threshold`` are kept. Sorting is
    stable, so equal scores keep catalog order. An empty suggestion list
    means nothing matched.
    """
    wanted_category = TokenCategory(category) if category else None
    query = literal.strip()
    query_type = detect_value_type(query)

    scored: List[MatchResult] = []
    for token in tokens:
        if wanted_category is not None and token.category is not wanted_category:
            continue
        if detect_value_type(token.value) is not query_type:
            continue
        score = similarity(query, token.value.strip(), query_type)
        if score < threshold:
            continue
        scored.append(
            MatchResult(
                query=literal,
                token_name=token.name,
                similarity=score,
                rationale=MatchRationale.EXACT if score == 1 else MatchRationale.CLOSE_NUMERIC,
                token_value=token.value,
                category=token.category,
                reason=migration_reason(score),
            )
        )

    scored.sort(key=lambda result: result.similarity, reverse=True)
    return MigrationSuggestion(input_value=literal, suggestions=scored[:limit])


_KIND_FILTERS: Dict[ValueKind, Callable[[DesignToken], bool]] = {
    ValueKind.COLOR: lambda token: token.category is TokenCategory.COLOR,
    ValueKind.SPACING: lambda token: token.category is TokenCategory.SPACING,
    ValueKind.FONT_SIZE: lambda token: "font-size" in token.name,
    ValueKind.FONT_WEIGHT: lambda token: "font-weight" in token.name,
    ValueKind.BORDER_RADIUS: lambda token: token.category is TokenCategory.BORDER,
    ValueKind.SHADOW: lambda token: token.category is TokenCategory.SHADOW,
}


def suggest_token_for_value(
    value: ExtractedValue, tokens: Iterable[DesignToken]
) -> Optional[DesignToken]:
    """Return the first token appropriate for the value's kind, in catalog order.

    This is deliberately not a ranking: it is the cheap lookup used by
    validation reports. Use :func:`suggest_migration` for scored results.
    """
    predicate = _KIND_FILTERS.get(value.kind)
    if predicate is None:
        return None
    for token in tokens:
        if predicate(token):
            return token
    return None


__all__ = [
    "DEFAULT_MIN_SIMILARITY",
    "DEFAULT_SUGGESTION_LIMIT",
    "find_exact_token",
    "match_value",
    "migration_reason",
    "normalize_value",
    "similarity",
    "suggest_migration",
    "suggest_token_for_value",
]

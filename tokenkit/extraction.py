"""Rule-driven extraction of literal style values from free-form text.

Each :class:`ExtractionRule` pairs a value kind with the CSS properties that
introduce it and the grammar of the value itself. Rules without property
names are property-agnostic and match anywhere in the text (colors), which
means a bare hex literal outside of any declaration is still reported.
Rules are applied independently, so one span of text may be reported by
several rules (a color inside a ``box-shadow`` for instance). Every emitted
value is tagged with the shape reported by :func:`detect_value_type`.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Pattern, Sequence, Tuple

from .models import ExtractedValue, ValueKind
from .values import detect_value_type

_NUMBER = r"(?:\d+(?:\.\d+)?|\.\d+)"
_LENGTH = _NUMBER + r"(?:px|rem|em)"
_SIDES = ("top", "right", "bottom", "left")


@dataclass(frozen=True)
class ExtractionRule:
    """Describes how one kind of literal is recognised."""

    kind: ValueKind
    value_patterns: Tuple[str, ...]
    property_names: Tuple[str, ...] = ()

    def compile(self) -> List[Pattern[str]]:
        if not self.property_names:
            return [re.compile(pattern, re.IGNORECASE) for pattern in self.value_patterns]
        properties = "|".join(re.escape(name) for name in self.property_names)
        return [
            re.compile(
                rf"(?<![\w-])(?P<property>{properties})\s*:\s*(?P<value>{pattern})",
                re.IGNORECASE,
            )
            for pattern in self.value_patterns
        ]


EXTRACTION_RULES: Tuple[ExtractionRule, ...] = (
    ExtractionRule(
        kind=ValueKind.COLOR,
        value_patterns=(
            r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b",
            r"rgba?\([^)]+\)",
        ),
    ),
    ExtractionRule(
        kind=ValueKind.SPACING,
        value_patterns=(_LENGTH,),
        property_names=(
            "padding",
            "margin",
            "gap",
            "width",
            "height",
            "top",
            "bottom",
            "left",
            "right",
            *(f"{box}-{side}" for box in ("padding", "margin") for side in _SIDES),
        ),
    ),
    ExtractionRule(
        kind=ValueKind.FONT_SIZE,
        value_patterns=(_LENGTH,),
        property_names=("font-size",),
    ),
    ExtractionRule(
        kind=ValueKind.FONT_WEIGHT,
        value_patterns=(r"\d{3}\b|normal\b|bold\b|lighter\b|bolder\b",),
        property_names=("font-weight",),
    ),
    ExtractionRule(
        kind=ValueKind.FONT_FAMILY,
        value_patterns=(r"[^;{}]+",),
        property_names=("font-family",),
    ),
    ExtractionRule(
        kind=ValueKind.BORDER_RADIUS,
        value_patterns=(_NUMBER + r"(?:px|rem|em|%)",),
        property_names=("border-radius",),
    ),
    ExtractionRule(
        kind=ValueKind.SHADOW,
        value_patterns=(r"[^;{}]+",),
        property_names=("box-shadow",),
    ),
)


class ValueExtractor:
    """Applies a rule table to style text."""

    def __init__(self, rules: Sequence[ExtractionRule] = EXTRACTION_RULES) -> None:
        self._compiled = [(rule, rule.compile()) for rule in rules]

    def extract(self, text: str) -> List[ExtractedValue]:
        line_starts = _line_starts(text)
        values: List[ExtractedValue] = []
        for rule, patterns in self._compiled:
            for pattern in patterns:
                for match in pattern.finditer(text):
                    if rule.property_names:
                        literal = match.group("value").strip()
                        prop = match.group("property").lower()
                        offset = match.start("value")
                    else:
                        literal = match.group(0)
                        prop = None
                        offset = match.start()
                    if not literal:
                        continue
                    values.append(
                        ExtractedValue(
                            kind=rule.kind,
                            literal=literal,
                            property=prop,
                            line=_line_for_offset(line_starts, offset),
                            value_type=detect_value_type(literal),
                        )
                    )
        return values


_DEFAULT_EXTRACTOR = ValueExtractor()


def extract_values(text: str) -> List[ExtractedValue]:
    """Extract every recognised literal from ``text`` using the default rules."""
    return _DEFAULT_EXTRACTOR.extract(text)


def group_values_by_kind(values: Iterable[ExtractedValue]) -> Dict[ValueKind, List[ExtractedValue]]:
    grouped: Dict[ValueKind, List[ExtractedValue]] = {}
    for value in values:
        grouped.setdefault(value.kind, []).append(value)
    return grouped


def _line_starts(text: str) -> List[int]:
    starts = [0]
    for index, char in enumerate(text):
        if char == "\n":
            starts.append(index + 1)
    return starts


def _line_for_offset(line_starts: Sequence[int], offset: int) -> int:
    return bisect.bisect_right(line_starts, offset)


__all__ = [
    "EXTRACTION_RULES",
    "ExtractionRule",
    "ValueExtractor",
    "extract_values",
    "group_values_by_kind",
]

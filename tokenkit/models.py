"""Core data models shared across tokenkit components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .values import ValueType


class TokenCategory(str, Enum):
    """Categories a design token can belong to."""

    COLOR = "color"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    BORDER = "border"
    SHADOW = "shadow"


class ValueKind(str, Enum):
    """Kinds of literal values recognised in style text."""

    COLOR = "color"
    SPACING = "spacing"
    FONT_SIZE = "font-size"
    FONT_WEIGHT = "font-weight"
    FONT_FAMILY = "font-family"
    BORDER_RADIUS = "border-radius"
    SHADOW = "shadow"
    UNKNOWN = "unknown"


class MatchRationale(str, Enum):
    EXACT = "exact"
    CLOSE_NUMERIC = "close-numeric"
    NO_MATCH = "no-match"


class ContrastLevel(str, Enum):
    FAIL = "fail"
    AA = "AA"
    AAA = "AAA"


@dataclass(frozen=True)
class DesignToken:
    """A named design constant with a literal CSS value."""

    name: str
    value: str
    category: TokenCategory
    description: Optional[str] = None


@dataclass(frozen=True)
class Component:
    """A design-system component and the token names it depends on."""

    name: str
    description: str
    tokens: Tuple[str, ...] = ()
    usage: str = ""
    examples: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentationEntry:
    """A searchable documentation section."""

    section: str
    title: str
    content: str
    tokens: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExtractedValue:
    """A literal value found in style text."""

    kind: ValueKind
    literal: str
    property: Optional[str] = None
    line: Optional[int] = None
    value_type: Optional[ValueType] = None


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one literal against the catalog."""

    query: str
    token_name: Optional[str]
    similarity: float
    rationale: MatchRationale
    token_value: Optional[str] = None
    category: Optional[TokenCategory] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class ContrastResult:
    """WCAG contrast outcome for a foreground/background pair."""

    ratio: float
    passes_aa: bool
    passes_aaa: bool
    classification: ContrastLevel


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness in percent."""

    hue: int
    saturation: int
    lightness: int


@dataclass
class MigrationSuggestion:
    """Ranked token suggestions for a hard-coded value."""

    input_value: str
    suggestions: list[MatchResult] = field(default_factory=list)


__all__ = [
    "Component",
    "ContrastLevel",
    "ContrastResult",
    "DesignToken",
    "DocumentationEntry",
    "ExtractedValue",
    "HSL",
    "MatchRationale",
    "MatchResult",
    "MigrationSuggestion",
    "RGB",
    "TokenCategory",
    "ValueKind",
]

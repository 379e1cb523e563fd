"""Bundled design-system dataset."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from ..logging import get_logger
from ..models import Component, DesignToken, DocumentationEntry, TokenCategory
from .base import Catalog

_COLOR = TokenCategory.COLOR
_SPACING = TokenCategory.SPACING
_TYPOGRAPHY = TokenCategory.TYPOGRAPHY
_BORDER = TokenCategory.BORDER
_SHADOW = TokenCategory.SHADOW

DOCS_URL = "https://docs.optics.rolemodel.design"

# Base HSL inputs per color family; every scale step is derived from these.
COLOR_FAMILY_DEFAULTS: Tuple[Tuple[str, str, str, str, str], ...] = (
    ("primary", "216", "58%", "48%", "Primary color"),
    ("neutral", "216", "4%", "48%", "Neutral color"),
    ("alerts-warning", "47", "100%", "61%", "Warning alert"),
    ("alerts-danger", "0", "99%", "76%", "Danger alert"),
    ("alerts-info", "216", "58%", "48%", "Info alert"),
    ("alerts-notice", "130", "61%", "64%", "Notice alert"),
)

_TOKEN_ROWS: Tuple[Tuple[str, str, TokenCategory, str], ...] = (
    ("op-color-white", "hsl(0deg 100% 100%)", _COLOR, "Pure white"),
    ("op-color-black", "hsl(0deg 0% 0%)", _COLOR, "Pure black"),
    ("op-space-scale-unit", "1rem", _SPACING, "Base unit for spacing scale (10px)"),
    ("op-space-3x-small", "calc(var(--op-space-scale-unit) * 0.2)", _SPACING, "2px spacing"),
    ("op-space-2x-small", "calc(var(--op-space-scale-unit) * 0.4)", _SPACING, "4px spacing"),
    ("op-space-x-small", "calc(var(--op-space-scale-unit) * 0.8)", _SPACING, "8px spacing"),
    ("op-space-small", "calc(var(--op-space-scale-unit) * 1.2)", _SPACING, "12px spacing"),
    ("op-space-medium", "calc(var(--op-space-scale-unit) * 1.6)", _SPACING, "16px spacing"),
    ("op-space-large", "calc(var(--op-space-scale-unit) * 2)", _SPACING, "20px spacing"),
    ("op-space-x-large", "calc(var(--op-space-scale-unit) * 2.4)", _SPACING, "24px spacing"),
    ("op-space-2x-large", "calc(var(--op-space-scale-unit) * 2.8)", _SPACING, "28px spacing"),
    ("op-space-3x-large", "calc(var(--op-space-scale-unit) * 4)", _SPACING, "40px spacing"),
    ("op-space-4x-large", "calc(var(--op-space-scale-unit) * 8)", _SPACING, "80px spacing"),
    ("op-font-family", "'Noto Sans', 'Noto Serif', sans-serif", _TYPOGRAPHY, "Font family for all text"),
    ("op-font-scale-unit", "1rem", _TYPOGRAPHY, "Base unit for font scale (10px)"),
    ("op-font-2x-small", "calc(var(--op-font-scale-unit) * 1)", _TYPOGRAPHY, "10px font size"),
    ("op-font-x-small", "calc(var(--op-font-scale-unit) * 1.2)", _TYPOGRAPHY, "12px font size"),
    ("op-font-small", "calc(var(--op-font-scale-unit) * 1.4)", _TYPOGRAPHY, "14px font size"),
    ("op-font-medium", "calc(var(--op-font-scale-unit) * 1.6)", _TYPOGRAPHY, "16px font size"),
    ("op-font-large", "calc(var(--op-font-scale-unit) * 1.8)", _TYPOGRAPHY, "18px font size"),
    ("op-font-x-large", "calc(var(--op-font-scale-unit) * 2)", _TYPOGRAPHY, "20px font size"),
    ("op-font-2x-large", "calc(var(--op-font-scale-unit) * 2.4)", _TYPOGRAPHY, "24px font size"),
    ("op-font-3x-large", "calc(var(--op-font-scale-unit) * 2.8)", _TYPOGRAPHY, "28px font size"),
    ("op-font-4x-large", "calc(var(--op-font-scale-unit) * 3.2)", _TYPOGRAPHY, "32px font size"),
    ("op-font-5x-large", "calc(var(--op-font-scale-unit) * 3.6)", _TYPOGRAPHY, "36px font size"),
    ("op-font-6x-large", "calc(var(--op-font-scale-unit) * 4.8)", _TYPOGRAPHY, "48px font size"),
    ("op-font-weight-thin", "100", _TYPOGRAPHY, "Thin font weight"),
    ("op-font-weight-extra-light", "200", _TYPOGRAPHY, "Extra light font weight"),
    ("op-font-weight-light", "300", _TYPOGRAPHY, "Light font weight"),
    ("op-font-weight-normal", "400", _TYPOGRAPHY, "Normal font weight"),
    ("op-font-weight-medium", "500", _TYPOGRAPHY, "Medium font weight"),
    ("op-font-weight-semi-bold", "600", _TYPOGRAPHY, "Semi-bold font weight"),
    ("op-font-weight-bold", "700", _TYPOGRAPHY, "Bold font weight"),
    ("op-font-weight-extra-bold", "800", _TYPOGRAPHY, "Extra bold font weight"),
    ("op-font-weight-black", "900", _TYPOGRAPHY, "Black font weight"),
    ("op-line-height-none", "0", _TYPOGRAPHY, "No line height"),
    ("op-line-height-densest", "1", _TYPOGRAPHY, "Densest line height"),
    ("op-line-height-denser", "1.15", _TYPOGRAPHY, "Denser line height"),
    ("op-line-height-dense", "1.3", _TYPOGRAPHY, "Dense line height"),
    ("op-line-height-base", "1.5", _TYPOGRAPHY, "Base line height"),
    ("op-line-height-loose", "1.6", _TYPOGRAPHY, "Loose line height"),
    ("op-line-height-looser", "1.7", _TYPOGRAPHY, "Looser line height"),
    ("op-line-height-loosest", "1.8", _TYPOGRAPHY, "Loosest line height"),
    ("op-letter-spacing-navigation", "0.01rem", _TYPOGRAPHY, "Letter spacing for navigation"),
    ("op-letter-spacing-label", "0.04rem", _TYPOGRAPHY, "Letter spacing for labels"),
    ("op-radius-small", "2px", _BORDER, "Small border radius"),
    ("op-radius-medium", "4px", _BORDER, "Medium border radius"),
    ("op-radius-large", "8px", _BORDER, "Large border radius"),
    ("op-radius-x-large", "12px", _BORDER, "Extra large border radius"),
    ("op-radius-2x-large", "16px", _BORDER, "2X large border radius"),
    ("op-radius-circle", "50%", _BORDER, "Circular border radius"),
    ("op-radius-pill", "9999px", _BORDER, "Pill-shaped border radius"),
    ("op-border-width", "1px", _BORDER, "Standard border width"),
    ("op-border-width-large", "2px", _BORDER, "Large border width"),
    ("op-border-width-x-large", "4px", _BORDER, "Extra large border width"),
    (
        "op-shadow-x-small",
        "0 1px 2px hsl(0deg 0% 0% / 3%), 0 1px 3px hsl(0deg 0% 0% / 15%)",
        _SHADOW,
        "Extra small shadow",
    ),
    (
        "op-shadow-small",
        "0 1px 2px hsl(0deg 0% 0% / 3%), 0 2px 6px hsl(0deg 0% 0% / 15%)",
        _SHADOW,
        "Small shadow",
    ),
    (
        "op-shadow-medium",
        "0 4px 8px hsl(0deg 0% 0% / 15%), 0 1px 3px hsl(0deg 0% 0% / 3%)",
        _SHADOW,
        "Medium shadow",
    ),
    (
        "op-shadow-large",
        "0 6px 10px hsl(0deg 0% 0% / 15%), 0 2px 3px hsl(0deg 0% 0% / 3%)",
        _SHADOW,
        "Large shadow",
    ),
    (
        "op-shadow-x-large",
        "0 8px 12px hsl(0deg 0% 0% / 15%), 0 4px 4px hsl(0deg 0% 0% / 3%)",
        _SHADOW,
        "Extra large shadow",
    ),
    ("op-opacity-none", "0", _COLOR, "No opacity"),
    ("op-opacity-overlay", "0.2", _COLOR, "Overlay opacity"),
    ("op-opacity-disabled", "0.4", _COLOR, "Disabled state opacity"),
    ("op-opacity-half", "0.5", _COLOR, "Half opacity"),
    ("op-opacity-full", "1", _COLOR, "Full opacity"),
)

_COMPONENT_ROWS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    (
        "Accordion",
        "Collapsible content panel with expand/collapse animation",
        ("--op-font-weight-semi-bold", "--op-font-x-large", "--op-font-x-small", "--op-space-2x-small"),
    ),
    (
        "Alert",
        "Notification component for displaying important messages (warning, danger, info, notice)",
        (
            "--op-color-alerts-danger-h",
            "--op-color-alerts-info-h",
            "--op-color-alerts-notice-h",
            "--op-color-alerts-warning-h",
            "--op-radius-medium",
            "--op-space-small",
        ),
    ),
    (
        "Badge",
        "Small status indicator or label with multiple color variants",
        ("--op-font-x-small", "--op-font-weight-medium", "--op-radius-pill", "--op-space-2x-small"),
    ),
    (
        "Button",
        "Interactive button component with multiple variants (primary, secondary, etc.) and states",
        (
            "--op-color-primary-h",
            "--op-color-primary-s",
            "--op-color-primary-l",
            "--op-font-small",
            "--op-font-weight-medium",
            "--op-opacity-disabled",
            "--op-radius-medium",
            "--op-space-small",
            "--op-transition-input",
        ),
    ),
    (
        "Card",
        "Container component for grouping related content with optional header, body, and footer",
        ("--op-color-white", "--op-radius-large", "--op-shadow-small", "--op-space-medium"),
    ),
    (
        "Form",
        "Form input components including text inputs, textareas, selects, and labels",
        (
            "--op-border-width",
            "--op-color-neutral-h",
            "--op-font-small",
            "--op-letter-spacing-label",
            "--op-radius-medium",
            "--op-space-x-small",
        ),
    ),
    (
        "Modal",
        "Dialog component for focused interactions and content overlays",
        ("--op-opacity-overlay", "--op-radius-x-large", "--op-shadow-x-large", "--op-space-large"),
    ),
    (
        "Navbar",
        "Top navigation bar component",
        ("--op-color-primary-h", "--op-letter-spacing-navigation", "--op-space-medium"),
    ),
    (
        "Table",
        "Data table component for displaying structured information",
        ("--op-border-width", "--op-font-small", "--op-line-height-dense", "--op-space-x-small"),
    ),
    (
        "Tooltip",
        "Contextual information component that appears on hover or focus",
        ("--op-color-black", "--op-font-2x-small", "--op-radius-small", "--op-shadow-medium"),
    ),
)


def build_tokens() -> List[DesignToken]:
    tokens: List[DesignToken] = []
    for family, hue, saturation, lightness, label in COLOR_FAMILY_DEFAULTS:
        tokens.append(DesignToken(f"op-color-{family}-h", hue, _COLOR, f"{label} hue (HSL)"))
        tokens.append(
            DesignToken(f"op-color-{family}-s", saturation, _COLOR, f"{label} saturation (HSL)")
        )
        tokens.append(
            DesignToken(f"op-color-{family}-l", lightness, _COLOR, f"{label} lightness (HSL)")
        )
    tokens.extend(
        DesignToken(name, value, category, description)
        for name, value, category, description in _TOKEN_ROWS
    )
    return tokens


def build_components() -> List[Component]:
    usage = f"See {DOCS_URL} for component usage and examples"
    return [
        Component(name=name, description=description, tokens=refs, usage=usage)
        for name, description, refs in _COMPONENT_ROWS
    ]


def build_documentation(tokens: List[DesignToken]) -> List[DocumentationEntry]:
    def _names(category: TokenCategory | None = None) -> Tuple[str, ...]:
        return tuple(t.name for t in tokens if category is None or t.category is category)

    return [
        DocumentationEntry(
            section="introduction",
            title="Introduction to Optics",
            content=(
                "Optics is a design system that provides a consistent visual language and "
                "component library for building user interfaces. It includes design tokens, "
                "components, patterns, and guidelines."
            ),
        ),
        DocumentationEntry(
            section="getting-started",
            title="Getting Started",
            content=(
                "Install the design system package and import the tokens and components you "
                "need. The system is modular, so you can use only what you need."
            ),
        ),
        DocumentationEntry(
            section="design-tokens",
            title="Design Tokens",
            content=(
                "Design tokens are named entities that store visual design attributes. Use them "
                "in place of hard-coded values to keep products consistent and themeable."
            ),
            tokens=_names(),
        ),
        DocumentationEntry(
            section="color-system",
            title="Color System",
            content=(
                "Colors are driven by HSL base values per family (primary, neutral and the "
                "warning, danger, info and notice alerts). Override the hue, saturation and "
                "lightness tokens to re-theme every scale step at once."
            ),
            tokens=_names(_COLOR),
        ),
        DocumentationEntry(
            section="spacing",
            title="Spacing System",
            content=(
                "Spacing tokens are multiples of a single scale unit and create a consistent "
                "visual rhythm between elements."
            ),
            tokens=_names(_SPACING),
        ),
        DocumentationEntry(
            section="typography",
            title="Typography",
            content=(
                "Font family, size, weight, line height and letter spacing tokens keep text "
                "styling consistent and establish a clear hierarchy."
            ),
            tokens=_names(_TYPOGRAPHY),
        ),
        DocumentationEntry(
            section="components",
            title="Components",
            content=(
                "Components are reusable UI elements built with design tokens. Each one lists "
                "the tokens it depends on."
            ),
        ),
        DocumentationEntry(
            section="accessibility",
            title="Accessibility Guidelines",
            content=(
                "All components target WCAG 2.1 AA. Check color contrast (4.5:1 for normal "
                "text, 7:1 for AAA), keyboard navigation and screen reader support."
            ),
        ),
    ]


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return the bundled catalog, built on first use and shared afterwards."""
    tokens = build_tokens()
    catalog = Catalog(tokens, build_components(), build_documentation(tokens))
    get_logger("catalog").debug(
        "Loaded bundled catalog with %d tokens and %d components",
        len(catalog.tokens),
        len(catalog.components),
    )
    return catalog


__all__ = [
    "COLOR_FAMILY_DEFAULTS",
    "DOCS_URL",
    "build_components",
    "build_documentation",
    "build_tokens",
    "default_catalog",
]

"""Theme assembly from brand colors.

Two assembly strategies exist and are never mixed:

* ``ThemeMode.OVERRIDE`` starts from the catalog and swaps the hue,
  saturation and lightness base tokens of each overridden color family.
  Colors are rendered as raw values.
* ``ThemeMode.FULL_GENERATION`` ignores the catalog and builds a flat token
  set from fixed scales plus one hex color per semantic role. Each color
  role is rendered as three HSL component properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .catalog import Catalog
from .color import hex_to_hsl, hex_to_rgb
from .figma import generate_figma_variables_json
from .logging import get_logger
from .models import HSL, DesignToken, TokenCategory

logger = get_logger("theme")

COLOR_FAMILIES: Tuple[str, ...] = (
    "primary",
    "neutral",
    "alerts-warning",
    "alerts-danger",
    "alerts-info",
    "alerts-notice",
)

SEMANTIC_COLOR_DEFAULTS: Dict[str, str] = {
    "primary": "#0066CC",
    "secondary": "#6C757D",
    "success": "#28A745",
    "warning": "#FFC107",
    "danger": "#DC3545",
    "info": "#17A2B8",
    "background": "#FFFFFF",
    "surface": "#F8F9FA",
    "text-primary": "#212529",
    "text-secondary": "#6C757D",
}

_SPACING_SCALE: Tuple[Tuple[str, str], ...] = (
    ("xs", "4px"),
    ("sm", "8px"),
    ("md", "16px"),
    ("lg", "24px"),
    ("xl", "32px"),
    ("2xl", "48px"),
)

_SANS_STACK = '"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif'

_TYPOGRAPHY_SCALE: Tuple[Tuple[str, str, str], ...] = (
    ("font-family-base", _SANS_STACK, "Base font family for body text"),
    ("font-family-heading", _SANS_STACK, "Font family for headings"),
    ("font-family-mono", '"SF Mono", "Monaco", "Consolas", monospace', "Monospace font family for code"),
    ("font-size-xs", "12px", "Extra small font size"),
    ("font-size-sm", "14px", "Small font size"),
    ("font-size-md", "16px", "Medium font size (base)"),
    ("font-size-lg", "18px", "Large font size"),
    ("font-size-xl", "20px", "Extra large font size"),
    ("font-size-2xl", "24px", "2X large font size"),
    ("font-size-3xl", "32px", "3X large font size"),
    ("font-weight-normal", "400", "Normal font weight"),
    ("font-weight-medium", "500", "Medium font weight"),
    ("font-weight-semibold", "600", "Semibold font weight"),
    ("font-weight-bold", "700", "Bold font weight"),
    ("line-height-tight", "1.25", "Tight line height for headings"),
    ("line-height-normal", "1.5", "Normal line height for body text"),
    ("line-height-relaxed", "1.75", "Relaxed line height for long-form content"),
)

_BORDER_SCALE: Tuple[Tuple[str, str, str], ...] = (
    ("border-radius-sm", "4px", "Small border radius"),
    ("border-radius-md", "8px", "Medium border radius"),
    ("border-radius-lg", "12px", "Large border radius"),
    ("border-radius-full", "9999px", "Full border radius for circular elements"),
)

_SHADOW_SCALE: Tuple[Tuple[str, str, str], ...] = (
    ("shadow-sm", "0 1px 2px 0 rgba(0, 0, 0, 0.05)", "Small shadow for subtle elevation"),
    ("shadow-md", "0 4px 6px -1px rgba(0, 0, 0, 0.1)", "Medium shadow for cards and panels"),
    ("shadow-lg", "0 10px 15px -3px rgba(0, 0, 0, 0.1)", "Large shadow for modals and popovers"),
)


class ThemeError(ValueError):
    """Raised for unknown theme modes, color families or roles."""


class ThemeMode(str, Enum):
    OVERRIDE = "override"
    FULL_GENERATION = "full-generation"


@dataclass
class GeneratedTheme:
    brand_name: str
    mode: ThemeMode
    tokens: List[DesignToken]
    css_text: str
    documentation: str = ""
    figma_json: str = ""
    overridden: List[str] = field(default_factory=list)


def family_tokens(family: str, hsl: HSL) -> List[DesignToken]:
    """Build the three HSL base tokens that drive one color family's scale."""
    return [
        DesignToken(
            f"op-color-{family}-h",
            str(hsl.hue),
            TokenCategory.COLOR,
            f"{family} color hue (HSL) - drives all {family} scale tokens",
        ),
        DesignToken(
            f"op-color-{family}-s",
            f"{hsl.saturation}%",
            TokenCategory.COLOR,
            f"{family} color saturation (HSL)",
        ),
        DesignToken(
            f"op-color-{family}-l",
            f"{hsl.lightness}%",
            TokenCategory.COLOR,
            f"{family} color lightness (HSL)",
        ),
    ]


def override_tokens(catalog: Catalog, overrides: Mapping[str, str]) -> Tuple[List[DesignToken], List[str]]:
    """Replace the HSL base tokens of each overridden family, in catalog order.

    Only families that have base tokens in ``catalog`` are reported as changed.
    """
    replacements: Dict[str, DesignToken] = {}
    owners: Dict[str, str] = {}
    for family, hex_value in overrides.items():
        if family not in COLOR_FAMILIES:
            raise ThemeError(
                f"Unknown color family '{family}'. Expected one of: {', '.join(COLOR_FAMILIES)}"
            )
        for token in family_tokens(family, hex_to_hsl(hex_value)):
            replacements[token.name] = token
            owners[token.name] = family
    tokens = [replacements.get(token.name, token) for token in catalog.tokens]
    replaced = {owners[token.name] for token in catalog.tokens if token.name in owners}
    families = [family for family in overrides if family in replaced]
    return tokens, families


def generate_tokens(colors: Mapping[str, str]) -> Tuple[List[DesignToken], List[str]]:
    """Synthesize a complete token set from the fixed scales and role colors."""
    for role in colors:
        if role not in SEMANTIC_COLOR_DEFAULTS:
            raise ThemeError(
                f"Unknown color role '{role}'. Expected one of: {', '.join(SEMANTIC_COLOR_DEFAULTS)}"
            )
    merged = {**SEMANTIC_COLOR_DEFAULTS, **colors}

    tokens: List[DesignToken] = []
    for role, hex_value in merged.items():
        hex_to_rgb(hex_value)  # raises InvalidColorFormat before anything is rendered
        tokens.append(
            DesignToken(f"color-{role}", hex_value, TokenCategory.COLOR, f"{role} color")
        )
    tokens.extend(
        DesignToken(f"spacing-{name}", value, TokenCategory.SPACING, f"Spacing {name} - {value}")
        for name, value in _SPACING_SCALE
    )
    tokens.extend(
        DesignToken(name, value, TokenCategory.TYPOGRAPHY, description)
        for name, value, description in _TYPOGRAPHY_SCALE
    )
    tokens.extend(
        DesignToken(name, value, TokenCategory.BORDER, description)
        for name, value, description in _BORDER_SCALE
    )
    tokens.extend(
        DesignToken(name, value, TokenCategory.SHADOW, description)
        for name, value, description in _SHADOW_SCALE
    )
    return tokens, list(colors)


def render_css(tokens: Sequence[DesignToken], brand_name: str, mode: ThemeMode) -> str:
    lines = [
        f"/* {brand_name} Theme - Generated by tokenkit */",
        f"/* Mode: {mode.value} */",
        ":root {",
    ]
    grouped = _group_by_category(tokens)

    colors = grouped.pop(TokenCategory.COLOR, [])
    if colors:
        lines.append("  /* Colors */")
        for token in colors:
            if mode is ThemeMode.FULL_GENERATION:
                hsl = hex_to_hsl(token.value)
                lines.append(f"  --{token.name}-h: {hsl.hue};")
                lines.append(f"  --{token.name}-s: {hsl.saturation}%;")
                lines.append(f"  --{token.name}-l: {hsl.lightness}%;")
            else:
                lines.append(f"  --{token.name}: {token.value};")
        lines.append("")

    for category, members in grouped.items():
        lines.append(f"  /* {category.value.capitalize()} */")
        for token in members:
            lines.append(f"  --{token.name}: {token.value};")
        lines.append("")

    lines.append("}")
    return "\n".join(lines)


def render_documentation(brand_name: str, tokens: Sequence[DesignToken]) -> str:
    grouped = _group_by_category(tokens)
    lines = [
        f"# {brand_name} Theme",
        "",
        "## Token Summary",
        "",
    ]
    for category, members in grouped.items():
        lines.append(f"- **{category.value}**: {len(members)} tokens")
    lines.extend(["", "## Token Categories", ""])
    for category, members in grouped.items():
        lines.append(f"### {category.value.capitalize()}")
        lines.append("")
        lines.append("| Token Name | Value | Description |")
        lines.append("|------------|-------|-------------|")
        for token in members:
            lines.append(f"| `{token.name}` | `{token.value}` | {token.description or ''} |")
        lines.append("")
    return "\n".join(lines)


def assemble_theme(
    brand_name: str,
    color_overrides: Optional[Mapping[str, str]],
    mode: ThemeMode | str,
    catalog: Optional[Catalog] = None,
) -> GeneratedTheme:
    """Assemble a theme for ``brand_name`` using exactly one strategy.

    Raises ``ThemeError`` for an unknown mode, family or role, and
    ``InvalidColorFormat`` when a supplied hex value is malformed.
    """
    try:
        theme_mode = ThemeMode(mode)
    except ValueError as exc:
        raise ThemeError(f"Unknown theme mode: {mode!r}") from exc

    colors = _normalize_keys(color_overrides or {})

    if theme_mode is ThemeMode.OVERRIDE:
        if catalog is None:
            raise ThemeError("Override mode requires a catalog to start from")
        tokens, changed = override_tokens(catalog, colors)
    else:
        tokens, changed = generate_tokens(colors)

    logger.debug(
        "Assembled %s theme '%s' with %d tokens (%d colors overridden)",
        theme_mode.value,
        brand_name,
        len(tokens),
        len(changed),
    )
    return GeneratedTheme(
        brand_name=brand_name,
        mode=theme_mode,
        tokens=tokens,
        css_text=render_css(tokens, brand_name, theme_mode),
        documentation=render_documentation(brand_name, tokens),
        figma_json=generate_figma_variables_json(
            tokens, collection_name=f"{brand_name} Design System"
        ),
        overridden=changed,
    )


def _normalize_keys(colors: Mapping[str, str]) -> Dict[str, str]:
    normalized: Dict[str, str] = {}
    for key, value in colors.items():
        if not value:
            continue
        normalized[key.strip().lower().replace("_", "-")] = value
    return normalized


def _group_by_category(tokens: Sequence[DesignToken]) -> Dict[TokenCategory, List[DesignToken]]:
    grouped: Dict[TokenCategory, List[DesignToken]] = {}
    for token in tokens:
        grouped.setdefault(token.category, []).append(token)
    return grouped


__all__ = [
    "COLOR_FAMILIES",
    "GeneratedTheme",
    "SEMANTIC_COLOR_DEFAULTS",
    "ThemeError",
    "ThemeMode",
    "assemble_theme",
    "family_tokens",
    "generate_tokens",
    "override_tokens",
    "render_css",
    "render_documentation",
]

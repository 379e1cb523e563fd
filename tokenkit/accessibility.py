"""WCAG contrast checks between catalog tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import Catalog
from .color import check_color_contrast
from .models import ContrastResult, DesignToken, TokenCategory

TOKEN_NOT_FOUND = "Token not found"
NOT_A_COLOR = "Unable to calculate contrast (non-color tokens?)"
NO_ALTERNATIVE = "No alternative tokens found with sufficient contrast"


@dataclass
class ContrastCheck:
    """Outcome of checking one foreground token against a background token.

    ``contrast`` is None when either token is missing (see ``missing``) or
    not a parseable color; ``recommendation`` then carries the reason.
    """

    foreground: str
    background: str
    foreground_value: str = ""
    background_value: str = ""
    contrast: Optional[ContrastResult] = None
    passes: bool = False
    recommendation: Optional[str] = None
    missing: List[str] = field(default_factory=list)


def check_token_contrast(foreground: str, background: str, catalog: Catalog) -> ContrastCheck:
    fg_token = catalog.find_token(foreground)
    bg_token = catalog.find_token(background)

    if fg_token is None or bg_token is None:
        missing = [
            name for name, token in ((foreground, fg_token), (background, bg_token)) if token is None
        ]
        return ContrastCheck(
            foreground=foreground,
            background=background,
            recommendation=f"{TOKEN_NOT_FOUND}: {', '.join(missing)}",
            missing=missing,
        )

    contrast = check_color_contrast(fg_token.value, bg_token.value)
    if contrast is None:
        return ContrastCheck(
            foreground=foreground,
            background=background,
            foreground_value=fg_token.value,
            background_value=bg_token.value,
            recommendation=NOT_A_COLOR,
        )

    recommendation = None
    if not contrast.passes_aa:
        recommendation = find_alternative(bg_token, catalog)

    return ContrastCheck(
        foreground=foreground,
        background=background,
        foreground_value=fg_token.value,
        background_value=bg_token.value,
        contrast=contrast,
        passes=contrast.passes_aa,
        recommendation=recommendation,
    )


def find_alternative(background: DesignToken, catalog: Catalog) -> str:
    """Recommend the first color token, in catalog order, passing AA on ``background``."""
    for token in catalog.tokens_in(TokenCategory.COLOR):
        if token.name == background.name:
            continue
        contrast = check_color_contrast(token.value, background.value)
        if contrast is not None and contrast.passes_aa:
            return f"Try using {token.name} ({token.value}) for better contrast"
    return NO_ALTERNATIVE


def check_all_combinations(background: str, catalog: Catalog) -> List[ContrastCheck]:
    """Check every other color token against ``background``, highest ratio first."""
    bg_token = catalog.find_token(background)
    if bg_token is None:
        return []
    results = [
        check_token_contrast(token.name, background, catalog)
        for token in catalog.tokens_in(TokenCategory.COLOR)
        if token.name != bg_token.name
    ]
    # stable: unparseable pairs keep catalog order after the computed ones
    results.sort(key=lambda check: -check.contrast.ratio if check.contrast else float("inf"))
    return results


__all__ = [
    "ContrastCheck",
    "NOT_A_COLOR",
    "NO_ALTERNATIVE",
    "TOKEN_NOT_FOUND",
    "check_all_combinations",
    "check_token_contrast",
    "find_alternative",
]

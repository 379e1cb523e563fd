"""tokenkit: design-token queries, accessibility checks and theme generation."""

from .accessibility import ContrastCheck, check_all_combinations, check_token_contrast
from .catalog import Catalog, CatalogError, TokenNotFoundError, default_catalog, load_catalog
from .color import ColorError, InvalidColorFormat, UnparseableColor, check_color_contrast, hex_to_hsl
from .extraction import extract_values
from .matching import find_exact_token, match_value, suggest_migration
from .models import DesignToken, ExtractedValue, MatchResult, TokenCategory, ValueKind
from .theme import GeneratedTheme, ThemeError, ThemeMode, assemble_theme
from .validation import replace_hard_coded_values, validate_token_usage

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CatalogError",
    "ColorError",
    "ContrastCheck",
    "DesignToken",
    "ExtractedValue",
    "GeneratedTheme",
    "InvalidColorFormat",
    "MatchResult",
    "ThemeError",
    "ThemeMode",
    "TokenCategory",
    "TokenNotFoundError",
    "UnparseableColor",
    "ValueKind",
    "assemble_theme",
    "check_all_combinations",
    "check_color_contrast",
    "check_token_contrast",
    "default_catalog",
    "extract_values",
    "find_exact_token",
    "hex_to_hsl",
    "load_catalog",
    "match_value",
    "replace_hard_coded_values",
    "suggest_migration",
    "validate_token_usage",
]

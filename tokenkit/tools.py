"""Tool and resource handlers exposed to calling agents.

Each handler takes plain arguments, calls into the core and renders text
(JSON for lookups, Markdown for reports). The MCP server and the CLI both
dispatch through :class:`TokenTools`.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional

from .accessibility import check_all_combinations, check_token_contrast
from .catalog import Catalog
from .color import ColorError, hex_to_hsl
from .config import MatchingConfig
from .matching import suggest_migration
from .models import Component, DesignToken, DocumentationEntry, TokenCategory
from .reports import (
    format_contrast_result,
    format_contrast_table,
    format_migration_suggestions,
    format_replacement_suggestions,
    format_validation_report,
)
from .theme import ThemeError, ThemeMode, assemble_theme
from .validation import replace_hard_coded_values, validate_token_usage

URI_SCHEME = "tokens://"


@dataclass(frozen=True)
class Resource:
    uri: str
    name: str
    description: str
    mime_type: str = "text/plain"


def token_to_dict(token: DesignToken) -> Dict[str, Any]:
    data = asdict(token)
    data["category"] = token.category.value
    if data["description"] is None:
        del data["description"]
    return data


def component_to_dict(component: Component) -> Dict[str, Any]:
    data = asdict(component)
    data["tokens"] = list(component.tokens)
    data["examples"] = list(component.examples)
    return data


def doc_to_dict(entry: DocumentationEntry) -> Dict[str, Any]:
    data = asdict(entry)
    data["tokens"] = list(entry.tokens)
    return data


def _dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2)


def _unknown_category(category: Optional[str]) -> bool:
    return bool(category) and category not in {c.value for c in TokenCategory}


class TokenTools:
    """Tool handlers bound to one catalog."""

    def __init__(self, catalog: Catalog, matching: MatchingConfig | None = None) -> None:
        self.catalog = catalog
        self.matching = matching or MatchingConfig()

    # -- lookups -----------------------------------------------------------

    def get_token(self, token_name: str) -> str:
        token = self.catalog.find_token(token_name)
        if token is None:
            names = ", ".join(t.name for t in self.catalog.tokens)
            return f"Token not found: {token_name}\n\nAvailable tokens: {names}"
        return _dumps(token_to_dict(token))

    def search_tokens(self, category: Optional[str] = None, name_pattern: Optional[str] = None) -> str:
        if _unknown_category(category):
            return f"Unknown category: {category}"
        tokens = self.catalog.search_tokens(category=category, name_pattern=name_pattern)
        return _dumps([token_to_dict(token) for token in tokens])

    def get_token_usage_stats(self) -> str:
        return _dumps(self.catalog.usage_stats())

    def get_component_info(self, component_name: str) -> str:
        component = self.catalog.get_component(component_name)
        if component is None:
            names = ", ".join(c.name for c in self.catalog.components)
            return f"Component not found: {component_name}\n\nAvailable components: {names}"
        return _dumps(component_to_dict(component))

    def list_components(self) -> str:
        return _dumps(
            [
                {"name": c.name, "description": c.description, "token_count": len(c.tokens)}
                for c in self.catalog.components
            ]
        )

    def get_component_tokens(self, component_name: str) -> str:
        component = self.catalog.get_component(component_name)
        tokens = self.catalog.component_tokens(component_name)
        if component is None or tokens is None:
            return f"Component not found: {component_name}"
        return _dumps(
            {
                "component": component.name,
                "description": component.description,
                "token_count": len(component.tokens),
                "tokens": [token_to_dict(token) for token in tokens],
            }
        )

    def search_documentation(self, query: str) -> str:
        return _dumps([doc_to_dict(entry) for entry in self.catalog.search_documentation(query)])

    # -- transformations ----------------------------------------------------

    def validate_token_usage(self, code: str) -> str:
        return format_validation_report(validate_token_usage(code, self.catalog))

    def replace_hard_coded_values(self, code: str, autofix: bool = False) -> str:
        return format_replacement_suggestions(
            replace_hard_coded_values(code, self.catalog, autofix=autofix)
        )

    def suggest_token_migration(self, value: str, category: Optional[str] = None) -> str:
        if _unknown_category(category):
            return f"Unknown category: {category}"
        suggestion = suggest_migration(
            value,
            self.catalog,
            category,
            limit=self.matching.max_suggestions,
            threshold=self.matching.min_similarity,
        )
        return format_migration_suggestions(suggestion)

    def check_contrast(self, foreground_token: str, background_token: str) -> str:
        return format_contrast_result(
            check_token_contrast(foreground_token, background_token, self.catalog)
        )

    def check_all_contrasts(self, background_token: str) -> str:
        return format_contrast_table(
            background_token, check_all_combinations(background_token, self.catalog)
        )

    def generate_theme(
        self,
        brand_name: str,
        colors: Optional[Mapping[str, str]] = None,
        mode: str = ThemeMode.OVERRIDE.value,
    ) -> str:
        try:
            theme = assemble_theme(brand_name, colors or {}, mode, self.catalog)
        except (ThemeError, ColorError) as exc:
            return f"Unable to generate theme: {exc}"
        return "\n\n".join(
            [
                theme.documentation,
                "## CSS Variables",
                f"```css\n{theme.css_text}\n```",
                "## Figma Variables",
                f"```json\n{theme.figma_json}\n```",
            ]
        )

    def hex_to_hsl(self, hex_color: str) -> str:
        try:
            hsl = hex_to_hsl(hex_color)
        except ColorError as exc:
            return f"Invalid color: {exc}"
        return _dumps(
            {
                "hex": hex_color,
                "hue": hsl.hue,
                "saturation": hsl.saturation,
                "lightness": hsl.lightness,
            }
        )

    # -- resources -----------------------------------------------------------

    def list_resources(self) -> List[Resource]:
        resources = [
            Resource(
                uri=f"{URI_SCHEME}documentation/{entry.section}",
                name=entry.title,
                description=entry.content.split(". ")[0],
            )
            for entry in self.catalog.documentation
        ]
        resources.append(
            Resource(
                uri=f"{URI_SCHEME}tokens/all",
                name="All Design Tokens",
                description="Every token in the catalog",
                mime_type="application/json",
            )
        )
        resources.extend(
            Resource(
                uri=f"{URI_SCHEME}tokens/{category.value}",
                name=f"{category.value.capitalize()} Tokens",
                description=f"Tokens in the {category.value} category",
                mime_type="application/json",
            )
            for category in TokenCategory
        )
        resources.append(
            Resource(
                uri=f"{URI_SCHEME}components/all",
                name="All Components",
                description="Every component and its token dependencies",
                mime_type="application/json",
            )
        )
        return resources

    def read_resource(self, uri: str) -> str:
        """Return resource content, raising KeyError for unknown URIs."""
        if not uri.startswith(URI_SCHEME):
            raise KeyError(f"Unknown resource URI: {uri}")
        kind, _, name = uri[len(URI_SCHEME):].partition("/")

        if kind == "documentation":
            for entry in self.catalog.documentation:
                if entry.section == name:
                    return f"# {entry.title}\n\n{entry.content}"
        elif kind == "tokens":
            if name == "all":
                return _dumps([token_to_dict(t) for t in self.catalog.tokens])
            if name in {c.value for c in TokenCategory}:
                return _dumps([token_to_dict(t) for t in self.catalog.tokens_in(name)])
        elif kind == "components" and name == "all":
            return _dumps([component_to_dict(c) for c in self.catalog.components])

        raise KeyError(f"Unknown resource URI: {uri}")


__all__ = ["Resource", "TokenTools", "URI_SCHEME", "component_to_dict", "doc_to_dict", "token_to_dict"]

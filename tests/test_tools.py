"""Tests for the tool and resource handlers."""

from __future__ import annotations

import json

import pytest

from tokenkit.catalog import Catalog
from tokenkit.config import MatchingConfig
from tokenkit.tools import TokenTools


@pytest.fixture
def tools(catalog: Catalog) -> TokenTools:
    return TokenTools(catalog)


def test_get_token_and_unknown_token(tools: TokenTools) -> None:
    payload = json.loads(tools.get_token("color-primary"))
    assert payload == {"name": "color-primary", "value": "#0066CC", "category": "color"}

    missing = tools.get_token("nope")
    assert missing.startswith("Token not found: nope")
    assert "color-primary" in missing


def test_search_tokens(tools: TokenTools) -> None:
    names = [item["name"] for item in json.loads(tools.search_tokens("spacing", "md"))]
    assert names == ["spacing-md"]
    assert tools.search_tokens("motion") == "Unknown category: motion"


def test_component_tools(tools: TokenTools) -> None:
    listing = json.loads(tools.list_components())
    assert listing[0] == {"name": "Button", "description": "Clickable action", "token_count": 3}

    resolved = json.loads(tools.get_component_tokens("button"))
    assert resolved["token_count"] == 3
    assert [t["name"] for t in resolved["tokens"]] == ["color-primary", "spacing-md"]

    assert tools.get_component_info("Nope").startswith("Component not found: Nope")


def test_contrast_tools_render_markdown(tools: TokenTools) -> None:
    single = tools.check_contrast("color-text-primary", "color-background")
    assert "**Contrast Ratio**: 15.43:1" in single
    assert "**Score**: AAA" in single

    failing = tools.check_contrast("color-text-muted", "color-background")
    assert "## Recommendation" in failing

    table = tools.check_all_contrasts("color-background")
    assert table.splitlines()[4].startswith("| `color-text-primary`")


def test_migration_respects_matching_config(catalog: Catalog) -> None:
    tools = TokenTools(catalog, MatchingConfig(max_suggestions=1, min_similarity=0.9))

    out = tools.suggest_token_migration("16px")

    assert out.count("### ") == 1
    assert "### spacing-md" in out


def test_migration_rejects_unknown_category(tools: TokenTools) -> None:
    assert tools.suggest_token_migration("16px", "bogus") == "Unknown category: bogus"
    assert "### spacing-md" in tools.suggest_token_migration("16px", "spacing")


def test_theme_and_hsl_errors_are_reported_as_text(tools: TokenTools) -> None:
    assert tools.generate_theme("Acme", {"brand": "#123456"}).startswith("Unable to generate theme:")
    assert tools.hex_to_hsl("nope").startswith("Invalid color:")

    generated = tools.generate_theme("Acme", {"primary": "#2D6FDB"}, "full-generation")
    assert "## CSS Variables" in generated
    assert "--color-primary-h: 217;" in generated


def test_replace_tool_includes_fixed_code(tools: TokenTools) -> None:
    out = tools.replace_hard_coded_values("a { padding: 16px; }", autofix=True)

    assert "Replace `16px` with `var(--spacing-md)`" in out
    assert "a { padding: var(--spacing-md); }" in out


def test_resources(tools: TokenTools) -> None:
    uris = [resource.uri for resource in tools.list_resources()]

    assert "tokens://documentation/colors" in uris
    assert "tokens://tokens/all" in uris
    assert "tokens://tokens/shadow" in uris
    assert "tokens://components/all" in uris

    assert tools.read_resource("tokens://documentation/spacing").startswith("# Spacing")
    colors = json.loads(tools.read_resource("tokens://tokens/color"))
    assert len(colors) == 5
    with pytest.raises(KeyError):
        tools.read_resource("tokens://tokens/motion")
    with pytest.raises(KeyError):
        tools.read_resource("http://example.com")

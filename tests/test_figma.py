"""Tests for the Figma Variables export."""

from __future__ import annotations

import json

from tokenkit.catalog import Catalog
from tokenkit.figma import convert_to_figma_variables, figma_type, generate_figma_variables_json
from tokenkit.models import DesignToken, TokenCategory


def test_figma_types(catalog: Catalog) -> None:
    types = {token.name: figma_type(token) for token in catalog}

    assert types["color-primary"] == "COLOR"
    assert types["color-overlay-opacity"] == "STRING"
    assert types["spacing-md"] == "FLOAT"
    assert types["radius-md"] == "FLOAT"
    assert types["font-size-body"] == "FLOAT"
    assert types["font-weight-bold"] == "FLOAT"
    assert types["shadow-sm"] == "STRING"


def test_convert_to_figma_variables(catalog: Catalog) -> None:
    collection, variables = convert_to_figma_variables(catalog.tokens, "Brand Kit")

    assert collection["id"] == "collection-brand-kit"
    assert collection["variableIds"] == [variable["id"] for variable in variables]
    primary = variables[0]
    assert primary["id"] == "VariableID:color_primary"
    assert primary["valuesByMode"]["mode-default"] == {"r": 0.0, "g": 0.4, "b": 0.8, "a": 1}
    spacing = next(v for v in variables if v["name"] == "spacing-md")
    assert spacing["valuesByMode"]["mode-default"] == {"value": 16.0}


def test_generate_json_is_parseable() -> None:
    tokens = [DesignToken("line-height-base", "1.5", TokenCategory.TYPOGRAPHY, "Body")]

    payload = json.loads(generate_figma_variables_json(tokens, prettify=False))

    assert payload["version"] == 1
    assert payload["variables"][0]["resolvedType"] == "FLOAT"
    assert payload["variables"][0]["description"] == "Body"

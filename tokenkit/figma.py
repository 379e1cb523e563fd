"""Export tokens in Figma's Variables JSON format."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Sequence, Tuple

from .color import parse_color
from .models import DesignToken, TokenCategory
from .values import numeric_magnitude

DEFAULT_COLLECTION = "Design System"
_MODE_ID = "mode-default"
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def figma_type(token: DesignToken) -> str:
    if token.category is TokenCategory.COLOR and parse_color(token.value) is not None:
        return "COLOR"
    if token.category in (TokenCategory.SPACING, TokenCategory.BORDER):
        return "FLOAT"
    if any(part in token.name for part in ("font-size", "line-height", "font-weight")):
        return "FLOAT"
    return "STRING"


def variable_value(token: DesignToken, resolved_type: str) -> Dict[str, Any]:
    rgb = parse_color(token.value)
    if resolved_type == "COLOR" and rgb is not None:
        return {"r": rgb.r / 255, "g": rgb.g / 255, "b": rgb.b / 255, "a": 1}
    if resolved_type == "FLOAT":
        magnitude = numeric_magnitude(token.value)
        return {"value": magnitude if magnitude is not None else 0}
    return {"value": token.value}


def convert_to_figma_variables(
    tokens: Sequence[DesignToken], collection_name: str = DEFAULT_COLLECTION
) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """Return the collection record and its variables for ``tokens``."""
    collection_id = "collection-" + re.sub(r"\s+", "-", collection_name).lower()
    variables: List[Dict[str, Any]] = []
    for token in tokens:
        variable_id = "VariableID:" + _NON_ALNUM.sub("_", token.name)
        resolved_type = figma_type(token)
        variables.append(
            {
                "id": variable_id,
                "name": token.name,
                "resolvedType": resolved_type,
                "valuesByMode": {_MODE_ID: variable_value(token, resolved_type)},
                "description": token.description or "",
                "remote": False,
                "key": variable_id,
            }
        )
    collection = {
        "id": collection_id,
        "name": collection_name,
        "modes": [{"modeId": _MODE_ID, "name": "Default"}],
        "variableIds": [variable["id"] for variable in variables],
        "defaultModeId": _MODE_ID,
        "remote": False,
        "key": collection_id,
    }
    return collection, variables


def generate_figma_variables_json(
    tokens: Sequence[DesignToken],
    *,
    collection_name: str = DEFAULT_COLLECTION,
    prettify: bool = True,
) -> str:
    collection, variables = convert_to_figma_variables(tokens, collection_name)
    payload = {"version": 1, "collections": [collection], "variables": variables}
    return json.dumps(payload, indent=2 if prettify else None)


__all__ = ["convert_to_figma_variables", "figma_type", "generate_figma_variables_json"]

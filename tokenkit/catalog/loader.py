"""Load a catalog from a JSON or YAML file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from ..logging import get_logger
from ..models import Component, DesignToken, DocumentationEntry, TokenCategory
from .base import Catalog, CatalogError

_YAML_SUFFIXES = {".yml", ".yaml"}


def load_catalog(path: Path) -> Catalog:
    """Read ``tokens``, ``components`` and ``documentation`` arrays from disk."""
    path = path.expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Unable to read catalog {path}: {exc}") from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Failed to parse {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise CatalogError(f"{path.name} must contain a mapping at the root")

    catalog = catalog_from_mapping(data)
    get_logger("catalog").debug("Loaded %d tokens from %s", len(catalog.tokens), path)
    return catalog


def catalog_from_mapping(data: Mapping[str, Any]) -> Catalog:
    tokens = [_token_from_dict(item, index) for index, item in enumerate(_as_list(data, "tokens"))]
    components = [
        _component_from_dict(item, index) for index, item in enumerate(_as_list(data, "components"))
    ]
    documentation = [
        _doc_from_dict(item, index) for index, item in enumerate(_as_list(data, "documentation"))
    ]
    return Catalog(tokens, components, documentation)


def _as_list(data: Mapping[str, Any], key: str) -> List[Dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogError(f"'{key}' must be a list")
    return value


def _token_from_dict(payload: Any, index: int) -> DesignToken:
    if not isinstance(payload, dict):
        raise CatalogError(f"tokens[{index}] must be a mapping")
    name = payload.get("name")
    value = payload.get("value")
    if not isinstance(name, str) or not name:
        raise CatalogError(f"tokens[{index}] is missing a name")
    if value is None:
        raise CatalogError(f"Token '{name}' is missing a value")
    try:
        category = TokenCategory(str(payload.get("category", "")).lower())
    except ValueError as exc:
        raise CatalogError(
            f"Token '{name}' has unknown category {payload.get('category')!r}"
        ) from exc
    description = payload.get("description")
    return DesignToken(
        name=name,
        value=str(value),
        category=category,
        description=str(description) if description is not None else None,
    )


def _component_from_dict(payload: Any, index: int) -> Component:
    if not isinstance(payload, dict) or not isinstance(payload.get("name"), str):
        raise CatalogError(f"components[{index}] must be a mapping with a name")
    return Component(
        name=payload["name"],
        description=str(payload.get("description", "")),
        tokens=tuple(str(item) for item in payload.get("tokens") or []),
        usage=str(payload.get("usage", "")),
        examples=tuple(str(item) for item in payload.get("examples") or []),
    )


def _doc_from_dict(payload: Any, index: int) -> DocumentationEntry:
    if not isinstance(payload, dict) or not isinstance(payload.get("section"), str):
        raise CatalogError(f"documentation[{index}] must be a mapping with a section")
    return DocumentationEntry(
        section=payload["section"],
        title=str(payload.get("title", payload["section"])),
        content=str(payload.get("content", "")),
        tokens=tuple(str(item) for item in payload.get("tokens") or []),
    )


__all__ = ["catalog_from_mapping", "load_catalog"]

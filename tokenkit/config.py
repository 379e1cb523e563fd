"""Configuration loading for tokenkit (.tokenkit.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .catalog import Catalog, default_catalog, load_catalog
from .matching import DEFAULT_MIN_SIMILARITY, DEFAULT_SUGGESTION_LIMIT

CONFIG_FILENAME = ".tokenkit.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MatchingConfig:
    """Migration suggestion limits."""

    max_suggestions: int = DEFAULT_SUGGESTION_LIMIT
    min_similarity: float = DEFAULT_MIN_SIMILARITY


@dataclass
class ThemeConfig:
    """Defaults for theme generation."""

    mode: Optional[str] = None
    brand_name: Optional[str] = None
    colors: Dict[str, str] = field(default_factory=dict)


@dataclass
class ServiceConfig:
    """Bind address for the HTTP service."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class TokenKitConfig:
    """Represents the settings defined in .tokenkit.yml."""

    root: Path
    catalog_path: Optional[Path] = None
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)


def load_config(config_path: Path) -> TokenKitConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return TokenKitConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    catalog_str = _as_str(data.get("catalog"))
    catalog_path = root / catalog_str if catalog_str else None

    matching = MatchingConfig()
    matching_data = _as_dict(data.get("matching"))
    if matching_data:
        limit = _as_int(matching_data.get("max_suggestions"))
        threshold = _as_float(matching_data.get("min_similarity"))
        if limit is not None:
            if limit < 1:
                raise ConfigError("matching.max_suggestions must be at least 1")
            matching.max_suggestions = limit
        if threshold is not None:
            if not 0 <= threshold <= 1:
                raise ConfigError("matching.min_similarity must be between 0 and 1")
            matching.min_similarity = threshold

    theme = ThemeConfig()
    theme_data = _as_dict(data.get("theme"))
    if theme_data:
        theme.mode = _as_str(theme_data.get("mode"))
        theme.brand_name = _as_str(theme_data.get("brand_name"))
        theme.colors = {
            str(key): str(value)
            for key, value in _as_dict(theme_data.get("colors")).items()
            if value is not None
        }

    service = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    if service_data:
        service.host = _as_str(service_data.get("host")) or service.host
        service.port = _as_int(service_data.get("port")) or service.port

    return TokenKitConfig(
        root=root,
        catalog_path=catalog_path,
        matching=matching,
        theme=theme,
        service=service,
    )


def resolve_catalog(config: TokenKitConfig) -> Catalog:
    """Return the configured catalog, or the bundled one when none is set."""
    if config.catalog_path is None:
        return default_catalog()
    return load_catalog(config.catalog_path)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "MatchingConfig",
    "ServiceConfig",
    "ThemeConfig",
    "TokenKitConfig",
    "load_config",
    "resolve_catalog",
]

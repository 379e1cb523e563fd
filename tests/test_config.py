"""Tests for tokenkit.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tokenkit.catalog import default_catalog
from tokenkit.config import ConfigError, TokenKitConfig, load_config, resolve_catalog


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, TokenKitConfig)
    assert config.root == tmp_path.resolve()
    assert config.catalog_path is None
    assert config.matching.max_suggestions == 5
    assert config.matching.min_similarity == 0.5
    assert config.theme.mode is None
    assert config.theme.colors == {}
    assert config.service.host == "127.0.0.1"
    assert config.service.port == 8000
    assert resolve_catalog(config) is default_catalog()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".tokenkit.yml"
    config_file.write_text(
        """
catalog: "design/tokens.json"
matching:
  max_suggestions: 3
  min_similarity: 0.7
theme:
  mode: "full-generation"
  brand_name: "Acme"
  colors:
    primary: "#2D6FDB"
    danger: "#C0392B"
service:
  host: "0.0.0.0"
  port: 9001
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.catalog_path == tmp_path.resolve() / "design" / "tokens.json"
    assert config.matching.max_suggestions == 3
    assert config.matching.min_similarity == 0.7
    assert config.theme.mode == "full-generation"
    assert config.theme.brand_name == "Acme"
    assert config.theme.colors == {"primary": "#2D6FDB", "danger": "#C0392B"}
    assert config.service.host == "0.0.0.0"
    assert config.service.port == 9001


def test_resolve_catalog_reads_configured_file(tmp_path: Path) -> None:
    (tmp_path / "tokens.json").write_text(
        json.dumps({"tokens": [{"name": "brand", "value": "#112233", "category": "color"}]}),
        encoding="utf-8",
    )
    (tmp_path / ".tokenkit.yml").write_text("catalog: tokens.json\n", encoding="utf-8")

    catalog = resolve_catalog(load_config(tmp_path))

    assert [token.name for token in catalog.tokens] == ["brand"]


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".tokenkit.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).matching.max_suggestions == 5


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "matching: [unclosed\n",
        "matching:\n  max_suggestions: 0\n",
        "matching:\n  min_similarity: 1.5\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".tokenkit.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)

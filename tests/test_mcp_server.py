"""Tests for the MCP server wiring."""

from __future__ import annotations

import pytest

fastmcp = pytest.importorskip("fastmcp")

from tokenkit.catalog import Catalog  # noqa: E402
from tokenkit.mcp_server import TOOL_DESCRIPTIONS, create_mcp_server  # noqa: E402
from tokenkit.tools import TokenTools  # noqa: E402


def test_every_tool_has_a_handler() -> None:
    for name in TOOL_DESCRIPTIONS:
        assert callable(getattr(TokenTools, name))


def test_create_mcp_server(catalog: Catalog) -> None:
    server = create_mcp_server(TokenTools(catalog))

    assert isinstance(server, fastmcp.FastMCP)
    assert server.name == "tokenkit"

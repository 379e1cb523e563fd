"""MCP server exposing the token tools over stdio."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from fastmcp import FastMCP

from .logging import get_logger
from .tools import Resource, TokenTools

SERVER_NAME = "tokenkit"

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "get_token": "Get detailed information about a specific design token by name",
    "search_tokens": "Search for design tokens by category or name pattern",
    "get_token_usage_stats": "Get statistics about design token usage across the system",
    "get_component_info": "Get a component including its design token dependencies",
    "list_components": "List all available components in the design system",
    "get_component_tokens": "Get all design tokens used by a specific component",
    "search_documentation": "Search through design system documentation",
    "validate_token_usage": "Find hard-coded values in CSS that should use design tokens",
    "replace_hard_coded_values": "Replace hard-coded values with var(--token) references",
    "suggest_token_migration": "Suggest design tokens for a hard-coded value, ranked by similarity",
    "check_contrast": "Check WCAG contrast between a foreground and a background token",
    "check_all_contrasts": "Check every color token against a background token",
    "generate_theme": "Generate a theme (CSS variables, docs, Figma JSON) from brand colors",
    "hex_to_hsl": "Convert a hex color to hue, saturation and lightness",
}


def create_mcp_server(tools: TokenTools) -> FastMCP:
    """Register every tool and resource of ``tools`` on a new FastMCP server."""
    mcp = FastMCP(SERVER_NAME)
    for name, description in TOOL_DESCRIPTIONS.items():
        mcp.tool(getattr(tools, name), name=name, description=description)
    for resource in tools.list_resources():
        reader, meta = _resource_reader(tools, resource)
        mcp.resource(resource.uri, **meta)(reader)
    get_logger("mcp").debug(
        "Registered %d tools and %d resources", len(TOOL_DESCRIPTIONS), len(tools.list_resources())
    )
    return mcp


def run_mcp_server(tools: TokenTools) -> None:  # pragma: no cover - stdio loop
    create_mcp_server(tools).run()


def _resource_reader(tools: TokenTools, resource: Resource) -> Tuple[Callable[[], str], dict]:
    def _read() -> str:
        return tools.read_resource(resource.uri)

    meta = {
        "name": resource.name,
        "description": resource.description,
        "mime_type": resource.mime_type,
    }
    return _read, meta


__all__ = ["SERVER_NAME", "TOOL_DESCRIPTIONS", "create_mcp_server", "run_mcp_server"]

"""CLI entrypoints for tokenkit commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict

from .catalog import CatalogError
from .color import ColorError
from .config import ConfigError, TokenKitConfig, load_config, resolve_catalog
from .logging import configure_logging, get_logger
from .models import TokenCategory
from .theme import ThemeError, ThemeMode, assemble_theme
from .tools import TokenTools


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_source_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        help="Stylesheet or component file to scan ('-' reads stdin).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenkit",
        description="Query design tokens, check accessibility and generate themes.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .tokenkit.yml or the directory holding it (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", help="Bind address (overrides config).")
    serve_parser.add_argument("--port", type=int, help="Bind port (overrides config).")

    mcp_parser = subparsers.add_parser("mcp", help="Run the MCP server over stdio.")
    _add_verbose_option(mcp_parser, suppress_default=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Report hard-coded values that should use design tokens.",
    )
    _add_verbose_option(validate_parser, suppress_default=True)
    _add_source_argument(validate_parser)

    replace_parser = subparsers.add_parser(
        "replace",
        help="Suggest var(--token) replacements for hard-coded values.",
    )
    _add_verbose_option(replace_parser, suppress_default=True)
    _add_source_argument(replace_parser)
    replace_parser.add_argument(
        "--autofix",
        action="store_true",
        help="Include the rewritten source in the output.",
    )

    migrate_parser = subparsers.add_parser(
        "migrate",
        help="Suggest tokens for a hard-coded value, ranked by similarity.",
    )
    _add_verbose_option(migrate_parser, suppress_default=True)
    migrate_parser.add_argument("value", help="Literal value such as 16px or #0066cc.")
    migrate_parser.add_argument(
        "--category",
        choices=[category.value for category in TokenCategory],
        help="Restrict suggestions to one token category.",
    )

    contrast_parser = subparsers.add_parser(
        "contrast",
        help="Check WCAG contrast between two color tokens.",
    )
    _add_verbose_option(contrast_parser, suppress_default=True)
    contrast_parser.add_argument("foreground", help="Foreground token name.")
    contrast_parser.add_argument("background", help="Background token name.")

    contrast_all_parser = subparsers.add_parser(
        "contrast-all",
        help="Check every color token against a background token.",
    )
    _add_verbose_option(contrast_all_parser, suppress_default=True)
    contrast_all_parser.add_argument("background", help="Background token name.")

    theme_parser = subparsers.add_parser(
        "theme",
        help="Generate a brand theme (CSS variables, docs and Figma JSON).",
    )
    _add_verbose_option(theme_parser, suppress_default=True)
    theme_parser.add_argument("brand_name", nargs="?", help="Brand name (defaults to config).")
    theme_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ThemeMode],
        help="Theme strategy (defaults to config, then override).",
    )
    theme_parser.add_argument("--primary", help="Primary brand color as hex.")
    theme_parser.add_argument("--neutral", help="Neutral color as hex.")
    theme_parser.add_argument(
        "--color",
        action="append",
        default=[],
        metavar="NAME=HEX",
        help="Additional family or role color; may be repeated.",
    )
    theme_parser.add_argument(
        "--output",
        help="Directory to write theme.css, THEME.md and figma-variables.json into.",
    )

    hsl_parser = subparsers.add_parser("hsl", help="Convert a hex color to HSL.")
    _add_verbose_option(hsl_parser, suppress_default=True)
    hsl_parser.add_argument("hex_color", help="Hex color such as #2D6FDB.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tokenkit commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        config = load_config(Path(args.config))
        catalog = resolve_catalog(config)
    except (ConfigError, CatalogError) as exc:
        parser.exit(1, f"{exc}\n")

    tools = TokenTools(catalog, config.matching)

    if args.command == "serve":
        from .service import run_service

        run_service(
            lambda: catalog,
            host=args.host or config.service.host,
            port=args.port or config.service.port,
            matching=config.matching,
        )
    elif args.command == "mcp":
        from .mcp_server import run_mcp_server

        run_mcp_server(tools)
    elif args.command == "validate":
        print(tools.validate_token_usage(_read_source(parser, args.source)))
    elif args.command == "replace":
        print(tools.replace_hard_coded_values(_read_source(parser, args.source), autofix=args.autofix))
    elif args.command == "migrate":
        print(tools.suggest_token_migration(args.value, args.category))
    elif args.command == "contrast":
        print(tools.check_contrast(args.foreground, args.background))
    elif args.command == "contrast-all":
        print(tools.check_all_contrasts(args.background))
    elif args.command == "theme":
        _run_theme(parser, args, config, tools)
    elif args.command == "hsl":
        print(tools.hex_to_hsl(args.hex_color))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_theme(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    config: TokenKitConfig,
    tools: TokenTools,
) -> None:
    brand_name = args.brand_name or config.theme.brand_name
    if not brand_name:
        parser.exit(1, "A brand name is required (argument or theme.brand_name in config)\n")
    mode = args.mode or config.theme.mode or ThemeMode.OVERRIDE.value
    colors = _collect_colors(parser, args, config)

    if args.output is None:
        print(tools.generate_theme(brand_name, colors, mode))
        return

    try:
        theme = assemble_theme(brand_name, colors, mode, tools.catalog)
    except (ThemeError, ColorError) as exc:
        parser.exit(1, f"Unable to generate theme: {exc}\n")

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "theme.css").write_text(theme.css_text, encoding="utf-8")
    (output_dir / "THEME.md").write_text(theme.documentation, encoding="utf-8")
    (output_dir / "figma-variables.json").write_text(theme.figma_json, encoding="utf-8")
    get_logger("cli").info("Wrote %d tokens to %s", len(theme.tokens), output_dir)
    print(f"Theme written to {_relativize(output_dir)}")


def _collect_colors(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: TokenKitConfig
) -> Dict[str, str]:
    colors: Dict[str, str] = dict(config.theme.colors)
    if args.primary:
        colors["primary"] = args.primary
    if args.neutral:
        colors["neutral"] = args.neutral
    for item in args.color:
        name, sep, value = item.partition("=")
        if not sep or not name or not value:
            parser.exit(1, f"Invalid --color value (expected NAME=HEX): {item}\n")
        colors[name.strip()] = value.strip()
    return colors


def _read_source(parser: argparse.ArgumentParser, source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        parser.exit(1, f"Unable to read {source}: {exc}\n")
    return ""  # pragma: no cover - parser.exit raises


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])

"""CLI entry point for the grocery categorizer."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv

from .categorizer import Categorizer, default_registry_provider
from .config import load_config
from .quantity import parse_quantity_from_name
from .splitter import parse_item_list
from .units import format_quantity_with_unit


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="grocery",
        description="Split, parse and categorize free-text grocery items",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # split
    split_parser = sub.add_parser("split", help="Split text into item strings")
    split_parser.add_argument("text", type=str)

    # parse
    parse_parser = sub.add_parser("parse", help="Extract quantity/unit from one item")
    parse_parser.add_argument("text", type=str)

    # categorize
    cat_parser = sub.add_parser("categorize", help="Split and categorize items")
    cat_parser.add_argument("text", type=str)
    cat_parser.add_argument(
        "--ai", action="store_true", help="Use the AI oracle (overrides config)"
    )
    cat_parser.add_argument("--json", action="store_true", help="Output as JSON")
    cat_parser.add_argument(
        "--lang", choices=["en", "he"], default="en", help="Display language"
    )

    # suggest
    sug_parser = sub.add_parser("suggest", help="Suggest categories for an item")
    sug_parser.add_argument("text", type=str)
    sug_parser.add_argument("--limit", type=int, default=None)

    # categories
    list_parser = sub.add_parser("categories", help="List known categories")
    list_parser.add_argument("--lang", choices=["en", "he"], default="en")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    match args.command:
        case "split":
            _cmd_split(args)
        case "parse":
            _cmd_parse(args)
        case "categorize":
            asyncio.run(_cmd_categorize(config, args))
        case "suggest":
            _cmd_suggest(config, args)
        case "categories":
            _cmd_categories(config, args)


def _cmd_split(args) -> None:
    for item in parse_item_list(args.text):
        print(item)


def _cmd_parse(args) -> None:
    parsed = parse_quantity_from_name(args.text)
    print(
        json.dumps(
            {"name": parsed.name, "quantity": parsed.quantity, "unit": parsed.unit},
            ensure_ascii=False,
        )
    )


async def _cmd_categorize(config, args) -> None:
    if args.ai:
        config.oracle.ai_enabled = True

    try:
        categorizer = Categorizer.from_config(config)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    results = await categorizer.categorize_text(args.text)

    if args.json:
        data = [{"input": item, **result.to_dict()} for item, result in results]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not results:
        print("No items found.")
        return

    registry = categorizer.registry
    for _, result in results:
        qty = format_quantity_with_unit(result.quantity, result.unit, args.lang)
        category = registry.category_name(result.category_id, args.lang)
        print(
            f"  {result.parsed_name:<20} {qty:<8} {category:<14} "
            f"{result.confidence:.0%} ({result.source})"
        )


def _cmd_suggest(config, args) -> None:
    categorizer = Categorizer(default_registry_provider(config.registry()))
    limit = args.limit or config.suggestions.limit
    suggestions = categorizer.suggest_categories(args.text, limit=limit)
    if not suggestions:
        print("No matching categories.")
        return
    for s in suggestions:
        print(f"  {s.category_id:<12} {s.score:.2f}")


def _cmd_categories(config, args) -> None:
    registry = config.registry()
    for category in registry:
        mark = "" if category.is_default else " (custom)"
        print(
            f"  {category.id:<12} {registry.category_name(category.id, args.lang)}"
            f"{mark}"
        )


if __name__ == "__main__":
    main()

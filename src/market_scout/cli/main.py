"""Main CLI entry point."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from market_scout.categories.registry import CategoryRegistry
from market_scout.config import Settings
from market_scout.filtering.window import WindowSelector
from market_scout.presentation.views import render_text
from market_scout.retrieval.client import RetrievalClient
from market_scout.session.controller import DashboardSession


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="market-scout",
        description="Market intelligence scout: opportunities by product category",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Provider base URL (default: MARKET_SCOUT_BASE_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--categories",
        default=None,
        help="YAML category catalog (default: MARKET_SCOUT_CATEGORIES or built-in list)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log fetch details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # categories
    categories_parser = subparsers.add_parser("categories", help="List selectable categories")
    categories_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    # show
    show_parser = subparsers.add_parser("show", help="Fetch and display opportunities")
    show_parser.add_argument(
        "--category",
        default=None,
        help="Category name (default: first catalog entry)",
    )
    show_parser.add_argument(
        "--window",
        default="all",
        choices=["all", "day", "today", "month", "year"],
        help="Time window (ignored for link-list and profile categories)",
    )
    show_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    return parser


def _load_registry(args: argparse.Namespace, settings: Settings) -> CategoryRegistry:
    path = args.categories or settings.categories_path
    if path:
        return CategoryRegistry.from_yaml(path)
    return CategoryRegistry()


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    registry = _load_registry(args, settings)

    if args.command == "categories":
        _run_categories(args, registry)
    elif args.command == "show":
        _run_show(args, registry, settings)
    else:
        parser.print_help()


def _run_categories(args: argparse.Namespace, registry: CategoryRegistry) -> None:
    """Run categories command."""
    if args.format == "json":
        print(json.dumps([c.model_dump(mode="json") for c in registry.list()], indent=2))
        return
    for category in registry.list():
        suffix = f" ({category.variant.value})" if category.variant.value != "default" else ""
        print(f"{category.name}{suffix}")


def _run_show(args: argparse.Namespace, registry: CategoryRegistry, settings: Settings) -> None:
    """Run show command."""
    name = args.category or registry.default().name
    if name not in registry:
        raise SystemExit(f"Unknown category: {name}. Available: {', '.join(registry.names())}")

    async def _show() -> DashboardSession:
        async with RetrievalClient(args.base_url or settings.base_url, timeout=settings.timeout) as client:
            session = DashboardSession(client, registry, initial_category=name)
            await session.refresh()
            session.select_window(WindowSelector.parse(args.window))
            return session

    session = asyncio.run(_show())
    if session.state.last_error:
        print(f"Fetch failed: {session.state.last_error}", file=sys.stderr)

    view = session.view()
    if args.format == "json":
        print(view.model_dump_json(indent=2))
    else:
        print(render_text(view))


if __name__ == "__main__":
    main()

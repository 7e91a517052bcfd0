"""
Main CLI entry point for the improv games catalog.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..catalog import CatalogLoader, GameCatalog
from ..config import DATA_SOURCE, DIFFICULTY_LEVELS
from ..error_handling import GameNotFoundError
from ..formatting import results_summary
from ..logging_config import setup_logging
from ..models import GameFilters
from .render import RULE, render_card, render_details, render_no_results

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="improv-games",
        description="Browse, search and filter the improv games catalog",
    )
    parser.add_argument("--data", default=DATA_SOURCE,
                        help="Catalog JSON file path or http(s) URL")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Custom log file name or absolute path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    search = subparsers.add_parser("search", help="Search and filter games")
    search.add_argument("query", nargs="?", default="", help="Free text to look for")
    search.add_argument("--category", default=None, help="Only games in this category")
    search.add_argument("--difficulty", default=None, choices=DIFFICULTY_LEVELS,
                        help="Only games of this difficulty")
    search.add_argument("--min-players", type=int, default=None,
                        help="Only games whose minimum player count is at least this")
    search.add_argument("--max-players", type=int, default=None,
                        help="Only games whose maximum player count is at most this")
    audience = search.add_mutually_exclusive_group()
    audience.add_argument("--audience", dest="audience_participation", action="store_const",
                          const=True, default=None, help="Only games with audience participation")
    audience.add_argument("--no-audience", dest="audience_participation", action="store_const",
                          const=False, help="Only games without audience participation")

    show = subparsers.add_parser("show", help="Show the details of one game")
    show.add_argument("game_id", help="Game id as listed in search results")

    subparsers.add_parser("categories", help="List the game categories")

    # Bare invocation lists the whole catalog
    parser.set_defaults(query="", category=None, difficulty=None, min_players=None,
                        max_players=None, audience_participation=None)
    return parser


def filters_from_args(args: argparse.Namespace) -> GameFilters:
    return GameFilters(
        category=args.category,
        difficulty=args.difficulty,
        min_players=args.min_players,
        max_players=args.max_players,
        audience_participation=args.audience_participation,
    )


def run_search(catalog: GameCatalog, args: argparse.Namespace) -> int:
    results = catalog.search_and_filter(args.query, filters_from_args(args))

    print(results_summary(len(results), len(catalog)))
    print(RULE)
    if not results:
        print(render_no_results())
        return 0
    for game in results:
        print(render_card(game))
        print()
    return 0


def run_show(catalog: GameCatalog, game_id: str) -> int:
    game = catalog.get_game_by_id(game_id)
    if game is None:
        raise GameNotFoundError(game_id)
    print(render_details(game))
    return 0


def run_categories(catalog: GameCatalog) -> int:
    for category in catalog.get_categories():
        print(category)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file or "improv_games.log",
                  level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        loader = CatalogLoader(args.data)
        try:
            catalog = loader.load()
        finally:
            loader.close()

        if catalog is None:
            print("Error: Failed to load game data. Check the catalog source and try again.",
                  file=sys.stderr)
            return 1

        if args.command == "show":
            return run_show(catalog, args.game_id)
        if args.command == "categories":
            return run_categories(catalog)
        return run_search(catalog, args)

    except GameNotFoundError as e:
        print(f"Error: {e}. Check the game id and try again.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nProcess interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error in main: {e}")
        raise


if __name__ == "__main__":
    sys.exit(main())

"""
Improv Games - a searchable catalog of improv games.

This package provides:
1. Loading the games document (file or URL) into a read-only catalog
2. Free-text search and attribute filtering over the catalog
3. A command-line browser for results and game details
"""

__version__ = "0.1.0"
__author__ = "MUT Improv Games Team"

# Main package imports for convenience
from .catalog import CatalogLoader, GameCatalog
from .models import Game, GameFilters, PlayerCount, RoleTips, Setup
from .query import distinct_categories, filter_games, search_and_filter, search_games
from .logging_config import setup_logging

__all__ = [
    "CatalogLoader",
    "GameCatalog",
    "Game",
    "GameFilters",
    "PlayerCount",
    "RoleTips",
    "Setup",
    "search_games",
    "filter_games",
    "search_and_filter",
    "distinct_categories",
    "setup_logging",
]

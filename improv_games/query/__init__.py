"""
Query engine for the game catalog: free-text search and attribute filters.
"""

from .engine import (
    distinct_categories,
    filter_games,
    matches_filters,
    matches_query,
    search_and_filter,
    search_games,
)

__all__ = [
    "search_games",
    "filter_games",
    "search_and_filter",
    "distinct_categories",
    "matches_query",
    "matches_filters",
]

"""
Read-only, in-memory catalog of games.

This module provides the lookups the presentation layer needs on top of the
loaded games, and delegates search and filtering to the query engine.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..models import Game, GameFilters
from ..query import distinct_categories, filter_games, search_and_filter, search_games

logger = logging.getLogger(__name__)


class GameCatalog:
    """
    The full set of games, sorted by name at load time and never mutated.
    """

    def __init__(self, games: Iterable[Game]):
        """
        Initialize the catalog.
        
        Args:
            games: Games in display order (the loader sorts them by name)
        """
        self._games: Tuple[Game, ...] = tuple(games)
        self._by_id = {game.id: game for game in self._games}

        if len(self._by_id) != len(self._games):
            logger.warning(
                f"Catalog contains duplicate game ids; "
                f"{len(self._games) - len(self._by_id)} lookups will resolve to a later entry"
            )

    @property
    def all_games(self) -> Tuple[Game, ...]:
        return self._games

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[Game]:
        return iter(self._games)

    def get_game_by_id(self, game_id: str) -> Optional[Game]:
        """Return the game with ``game_id``, or ``None`` if absent."""
        return self._by_id.get(game_id)

    def get_games_by_category(self, category_name: str) -> List[Game]:
        return [game for game in self._games if game.category == category_name]

    def get_categories(self) -> List[str]:
        """Distinct category names, sorted, for populating a selector."""
        return distinct_categories(self._games)

    def search(self, query: Optional[str]) -> List[Game]:
        return search_games(self._games, query)

    def filter(self, filters: Optional[GameFilters]) -> List[Game]:
        return filter_games(self._games, filters)

    def search_and_filter(self, query: Optional[str],
                          filters: Optional[GameFilters] = None) -> List[Game]:
        return search_and_filter(self._games, query, filters)

"""
Search and filter over the in-memory game catalog.

Search is a case-insensitive substring scan across the searchable text of
each game; filtering is an AND of equality and range predicates. Neither
operation re-ranks: results keep the relative order of their input, which
for the full catalog is alphabetical by name.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from ..models import Game, GameFilters, RoleTips

logger = logging.getLogger(__name__)


def _contains(text: Optional[str], term: str) -> bool:
    return bool(text) and term in text.lower()


def _any_contains(texts: Optional[Iterable[str]], term: str) -> bool:
    return bool(texts) and any(_contains(text, term) for text in texts)


def _tip_texts(game: Game) -> Iterator[str]:
    """Yield every searchable tip string; role labels are not searchable."""
    for tip in game.tips or ():
        if isinstance(tip, str):
            yield tip
        elif isinstance(tip, RoleTips) and tip.role and tip.tips:
            yield from tip.tips


def matches_query(game: Game, term: str) -> bool:
    """
    Check whether a normalized (stripped, lower-cased) term occurs in any
    searchable field of a game.

    Fields are tried in a fixed order and the scan stops at the first hit:
    name, setup description, rules, tips, examples, tags, category.
    """
    if _contains(game.name, term):
        return True
    if game.setup and _contains(game.setup.description, term):
        return True
    if _any_contains(game.rules, term):
        return True
    if _any_contains(_tip_texts(game), term):
        return True
    if _any_contains(game.examples, term):
        return True
    if _any_contains(game.tags, term):
        return True
    return _contains(game.category, term)


def search_games(records: Sequence[Game], query: Optional[str]) -> List[Game]:
    """
    Return the games whose searchable text contains ``query``.

    Args:
        records: Games to search, in display order
        query: Free text; empty or whitespace-only returns every game

    Returns:
        Matching games in their original relative order
    """
    if not query or not query.strip():
        return list(records)

    term = query.strip().lower()
    results = [game for game in records if matches_query(game, term)]
    logger.debug(f"Search '{term}' matched {len(results)} of {len(records)} games")
    return results


def matches_filters(game: Game, filters: GameFilters) -> bool:
    """Check one game against every active constraint in ``filters``."""
    if filters.category and game.category != filters.category:
        return False

    if filters.difficulty and game.difficulty != filters.difficulty:
        return False

    # The player bounds constrain the game's whole supported range:
    # its minimum must be at least min_players and its maximum at most max_players.
    if filters.min_players:
        if game.player_count is None or game.player_count.min < filters.min_players:
            return False
    if filters.max_players:
        if game.player_count is None or game.player_count.max > filters.max_players:
            return False

    if (filters.audience_participation is not None
            and game.audience_participation != filters.audience_participation):
        return False

    return True


def filter_games(records: Sequence[Game], filters: Optional[GameFilters] = None) -> List[Game]:
    """
    Return the games satisfying all active filter constraints.

    Args:
        records: Games to filter, in any order
        filters: Constraints; ``None`` or an empty filter set keeps every game

    Returns:
        Matching games in their original relative order
    """
    if filters is None or filters.is_empty():
        return list(records)

    results = [game for game in records if matches_filters(game, filters)]
    logger.debug(f"Filters {filters} kept {len(results)} of {len(records)} games")
    return results


def search_and_filter(records: Sequence[Game], query: Optional[str],
                      filters: Optional[GameFilters] = None) -> List[Game]:
    """Search first, then narrow the matches with ``filters``."""
    return filter_games(search_games(records, query), filters)


def distinct_categories(records: Iterable[Game]) -> List[str]:
    """Return every category present in ``records``, deduplicated and sorted."""
    return sorted({game.category for game in records if game.category})

"""
Shared data models for the improv games package.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class PlayerCount:
    """Supported player range; ``min <= optimal <= max``."""
    min: int
    max: int
    optimal: int


@dataclass(frozen=True)
class Setup:
    description: Optional[str] = None


@dataclass(frozen=True)
class RoleTips:
    """Tips addressed to one role in the game (e.g. host, guesser)."""
    role: str
    tips: Tuple[str, ...] = ()


# A tip is either plain text or a group of tips for a role
Tip = Union[str, RoleTips]


@dataclass(frozen=True)
class Game:
    """One catalog entry. Read-only once loaded."""
    id: str
    name: str
    category: Optional[str] = None
    category_id: Optional[str] = None
    difficulty: Optional[str] = None
    tags: Tuple[str, ...] = ()
    player_count: Optional[PlayerCount] = None
    setup: Optional[Setup] = None
    rules: Tuple[str, ...] = ()
    tips: Tuple[Tip, ...] = ()
    examples: Tuple[str, ...] = ()
    duration: Optional[str] = None
    audience_participation: Optional[bool] = None
    audience_count: Optional[str] = None
    aliases: Tuple[str, ...] = ()
    video_links: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = ()

    @property
    def description(self) -> Optional[str]:
        return self.setup.description if self.setup else None


@dataclass(frozen=True)
class GameFilters:
    """
    Structured constraints combined with AND.

    Empty strings, ``None`` and zero player bounds impose no constraint.
    """
    category: Optional[str] = None
    difficulty: Optional[str] = None
    min_players: Optional[int] = None
    max_players: Optional[int] = None
    audience_participation: Optional[bool] = None

    def is_empty(self) -> bool:
        return not (self.category or self.difficulty or self.min_players
                    or self.max_players or self.audience_participation is not None)

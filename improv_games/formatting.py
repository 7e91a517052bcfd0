"""
Display helpers shared by the presentation layer.
"""

import re
from typing import Optional

from .config import (
    DEFAULT_DIFFICULTY_MARKER,
    DIFFICULTY_MARKERS,
    NOT_SPECIFIED,
    YOUTUBE_EMBED_BASE,
    YOUTUBE_ID_PATTERNS,
)
from .models import PlayerCount

_YOUTUBE_ID_RES = [re.compile(pattern) for pattern in YOUTUBE_ID_PATTERNS]


def format_player_count(player_count: Optional[PlayerCount]) -> str:
    """
    Format a player range for display.

    Examples:
        (2, 2, 2) → "2 players"
        (3, 8, 5) → "3-8 players (optimal: 5)"
    """
    if player_count is None:
        return NOT_SPECIFIED
    if player_count.min == player_count.max:
        return f"{player_count.min} players"
    return f"{player_count.min}-{player_count.max} players (optimal: {player_count.optimal})"


def format_duration(duration: Optional[str]) -> str:
    return duration or NOT_SPECIFIED


def difficulty_marker(difficulty: Optional[str]) -> str:
    """Fixed-width star gauge for a difficulty level; blank for unknown levels."""
    return DIFFICULTY_MARKERS.get(difficulty or "", DEFAULT_DIFFICULTY_MARKER)


def format_difficulty(difficulty: Optional[str]) -> str:
    return f"{difficulty_marker(difficulty)} {capitalize_first(difficulty) or NOT_SPECIFIED}"


def capitalize_first(text: Optional[str]) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def format_tag_name(tag: str) -> str:
    """Turn a tag key into a label: ``family_friendly`` → ``Family Friendly``."""
    return " ".join(capitalize_first(word) for word in tag.split("_"))


def extract_youtube_id(url: str) -> Optional[str]:
    """
    Extract the 11-character video id from a YouTube URL.

    Handles watch, embed, ``/v/`` and youtu.be forms; returns None for
    anything else.
    """
    if not url:
        return None
    for pattern in _YOUTUBE_ID_RES:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def youtube_embed_url(video_id: str) -> str:
    return f"{YOUTUBE_EMBED_BASE}{video_id}"


def results_summary(count: int, total: int) -> str:
    """Headline for a result list relative to the full catalog."""
    if count == total:
        return f"Found {total} improv games ready to explore"
    return f"Found {count} of {total} games matching your search"

"""Display helpers."""
import pytest

from improv_games.formatting import (
    capitalize_first,
    difficulty_marker,
    extract_youtube_id,
    format_difficulty,
    format_duration,
    format_player_count,
    format_tag_name,
    results_summary,
    youtube_embed_url,
)
from improv_games.models import PlayerCount


def test_format_player_count():
    assert format_player_count(PlayerCount(min=2, max=2, optimal=2)) == "2 players"
    assert format_player_count(PlayerCount(min=3, max=8, optimal=5)) == "3-8 players (optimal: 5)"
    assert format_player_count(None) == "Not specified"


def test_format_duration():
    assert format_duration("5 minutes") == "5 minutes"
    assert format_duration(None) == "Not specified"
    assert format_duration("") == "Not specified"


@pytest.mark.parametrize("difficulty,expected", [
    ("beginner", "[*  ]"),
    ("intermediate", "[** ]"),
    ("advanced", "[***]"),
    ("expert", "[   ]"),
    (None, "[   ]"),
])
def test_difficulty_marker(difficulty, expected):
    assert difficulty_marker(difficulty) == expected


def test_format_difficulty():
    assert format_difficulty("intermediate") == "[** ] Intermediate"
    assert format_difficulty(None) == "[   ] Not specified"


def test_format_tag_name():
    assert format_tag_name("family_friendly") == "Family Friendly"
    assert format_tag_name("warmup") == "Warmup"


def test_capitalize_first():
    assert capitalize_first("beginner") == "Beginner"
    assert capitalize_first("") == ""
    assert capitalize_first(None) == ""


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "youtube.com/v/dQw4w9WgXcQ",
])
def test_extract_youtube_id(url):
    assert extract_youtube_id(url) == "dQw4w9WgXcQ"


def test_extract_youtube_id_rejects_other_urls():
    assert extract_youtube_id("https://vimeo.com/12345") is None
    assert extract_youtube_id("") is None


def test_youtube_embed_url():
    assert youtube_embed_url("dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"


def test_results_summary():
    assert results_summary(12, 12) == "Found 12 improv games ready to explore"
    assert results_summary(3, 12) == "Found 3 of 12 games matching your search"

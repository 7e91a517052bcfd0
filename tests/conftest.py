"""Shared fixtures for the improv games tests."""
import json

import pytest

from improv_games.catalog import GameCatalog
from improv_games.models import Game, PlayerCount, RoleTips, Setup


@pytest.fixture
def freeze_tag():
    return Game(
        id="freeze-tag",
        name="Freeze Tag",
        category="Opening Games",
        difficulty="beginner",
        tags=("family_friendly",),
        player_count=PlayerCount(min=4, max=10, optimal=6),
        setup=Setup(description="Two players start a scene."),
        rules=("Shout freeze to swap in.",),
        tips=("Keep energy high",),
        audience_participation=False,
    )


@pytest.fixture
def alphabet_game():
    return Game(
        id="alphabet-game",
        name="Alphabet Game",
        category="Scene Games",
        difficulty="advanced",
        player_count=PlayerCount(min=2, max=2, optimal=2),
        examples=("A: Are you ready? B: Born ready.",),
        audience_participation=True,
    )


@pytest.fixture
def freeze_frame():
    return Game(
        id="freeze-frame",
        name="Freeze Frame",
        category="Opening Games",
        difficulty="intermediate",
        player_count=PlayerCount(min=3, max=8, optimal=5),
        tips=(RoleTips(role="host", tips=("Call stop at a tense moment",)),),
    )


@pytest.fixture
def games(freeze_tag, alphabet_game, freeze_frame):
    """Three games in catalog order A, B, C."""
    return [freeze_tag, alphabet_game, freeze_frame]


@pytest.fixture
def catalog(games):
    return GameCatalog(sorted(games, key=lambda g: g.name.casefold()))


@pytest.fixture
def document():
    return {
        "categories": [
            {
                "id": "scene",
                "name": "Scene Games",
                "games": [
                    {
                        "id": "zip-zap-zop",
                        "name": "zip zap zop",
                        "difficulty": "beginner",
                        "tags": ["warmup"],
                        "playerCount": {"min": 3, "max": 20, "optimal": 8},
                    },
                    {
                        "id": "alphabet-game",
                        "name": "Alphabet Game",
                        "difficulty": "advanced",
                        "playerCount": {"min": 2, "max": 2, "optimal": 2},
                        "audienceParticipation": True,
                        "audienceCount": 1,
                        "tips": [
                            "Listen to the last word",
                            {"role": "host", "tips": ["Ask for a letter"]},
                        ],
                        "videoLinks": ["https://youtu.be/dQw4w9WgXcQ"],
                        "somethingElse": "ignored",
                    },
                ],
            },
            {
                "id": "opening",
                "name": "Opening Games",
                "games": [
                    {
                        "id": "freeze-tag",
                        "name": "Freeze Tag",
                        "difficulty": "beginner",
                        "setup": {"description": "Two players start a scene."},
                    },
                ],
            },
        ]
    }


@pytest.fixture
def document_path(tmp_path, document):
    path = tmp_path / "mutgames.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path

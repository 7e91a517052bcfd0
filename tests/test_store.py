"""Lookups and query delegation on the loaded catalog."""
from improv_games.catalog import GameCatalog
from improv_games.models import Game, GameFilters


def test_all_games_is_immutable_tuple(catalog):
    assert isinstance(catalog.all_games, tuple)
    assert len(catalog) == 3


def test_get_game_by_id(catalog, freeze_frame):
    assert catalog.get_game_by_id("freeze-frame") is freeze_frame
    assert catalog.get_game_by_id("missing") is None


def test_get_games_by_category(catalog):
    assert [g.id for g in catalog.get_games_by_category("Opening Games")] == [
        "freeze-frame", "freeze-tag"]
    assert catalog.get_games_by_category("Nope") == []


def test_get_categories(catalog):
    assert catalog.get_categories() == ["Opening Games", "Scene Games"]


def test_search_uses_catalog_order(catalog):
    assert [g.id for g in catalog.search("freeze")] == ["freeze-frame", "freeze-tag"]


def test_search_and_filter(catalog):
    result = catalog.search_and_filter("freeze", GameFilters(difficulty="intermediate"))
    assert [g.id for g in result] == ["freeze-frame"]


def test_filter(catalog):
    assert [g.id for g in catalog.filter(GameFilters(difficulty="advanced"))] == ["alphabet-game"]


def test_duplicate_ids_are_logged(caplog):
    games = [Game(id="dup", name="One"), Game(id="dup", name="Two")]
    catalog = GameCatalog(games)
    assert len(catalog) == 2
    assert "duplicate game ids" in caplog.text

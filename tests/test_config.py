"""Default settings resolve inside the installed package."""

from improv_games import config
from improv_games.catalog import CatalogLoader


def test_bundled_catalog_lives_in_package():
    data_file = config.DATA_DIR / "mutgames.json"
    assert data_file.is_file()
    assert config.PACKAGE_DIR in data_file.parents
    assert (config.PACKAGE_DIR / "__init__.py").is_file()


def test_bundled_catalog_loads():
    catalog = CatalogLoader(config.DATA_DIR / "mutgames.json").load()
    assert catalog is not None
    assert catalog.get_categories() == ["Opening Games", "Scene Games"]
    assert catalog.get_game_by_id("freeze-tag").name == "Freeze Tag"

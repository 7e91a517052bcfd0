"""
Catalog package for loading the game document and holding the loaded games.
"""

from .loader import CatalogLoader
from .store import GameCatalog

__all__ = [
    "CatalogLoader",
    "GameCatalog",
]

"""
Catalog loader: fetches the source document and flattens it into games.

The document may live on disk or behind an http(s) URL. Games are pulled out
of their categories, tagged with the category they were listed under and
sorted by name before being handed to the catalog.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from pydantic import ValidationError

from ..config import (
    DATA_SOURCE,
    REQUEST_TIMEOUT,
    RETRY_BACKOFF,
    RETRY_STATUS_CODES,
    RETRY_TOTAL,
    USER_AGENT,
)
from ..error_handling import CatalogLoadError, handle_errors
from ..models import Game, PlayerCount, RoleTips, Setup, Tip
from .schema import CatalogDocument, GameDoc, RoleTipsDoc
from .store import GameCatalog

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _convert_tip(tip: Union[str, RoleTipsDoc]) -> Tip:
    if isinstance(tip, str):
        return tip
    return RoleTips(role=tip.role or "", tips=tuple(tip.tips))


def _convert_game(doc: GameDoc, category_name: str, category_id: Optional[str]) -> Game:
    """Build a domain game from its document entry, denormalizing its category."""
    player_count = None
    if doc.player_count is not None:
        player_count = PlayerCount(
            min=doc.player_count.min,
            max=doc.player_count.max,
            optimal=doc.player_count.optimal,
        )

    return Game(
        id=doc.id,
        name=doc.name,
        category=category_name,
        category_id=category_id,
        difficulty=doc.difficulty,
        tags=tuple(doc.tags),
        player_count=player_count,
        setup=Setup(description=doc.setup.description) if doc.setup else None,
        rules=tuple(doc.rules),
        tips=tuple(_convert_tip(tip) for tip in doc.tips),
        examples=tuple(doc.examples),
        duration=doc.duration,
        audience_participation=doc.audience_participation,
        audience_count=str(doc.audience_count) if doc.audience_count is not None else None,
        aliases=tuple(doc.aliases),
        video_links=tuple(doc.video_links),
        notes=tuple(doc.notes),
    )


class CatalogLoader:
    """
    Loads the game catalog from a JSON document.
    """

    def __init__(self, source: Union[str, Path] = DATA_SOURCE, timeout: float = REQUEST_TIMEOUT):
        """
        Initialize the loader.
        
        Args:
            source: Path to the catalog JSON, or an http(s) URL serving it
            timeout: Request timeout in seconds for remote sources
        """
        self.source = str(source)
        self.timeout = timeout
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """HTTP session with a basic retry policy, created on first use."""
        if self._session is None:
            session = requests.Session()
            session.headers.update({'User-Agent': USER_AGENT, 'Accept': 'application/json'})
            retries = Retry(
                total=RETRY_TOTAL,
                backoff_factor=RETRY_BACKOFF,
                status_forcelist=RETRY_STATUS_CODES,
                allowed_methods=["HEAD", "GET", "OPTIONS"],
            )
            adapter = HTTPAdapter(max_retries=retries)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
            self._session = session
        return self._session

    def fetch_document(self) -> Any:
        """
        Read and decode the raw catalog document.
        
        Returns:
            Decoded JSON data
            
        Raises:
            CatalogLoadError: If the document is unreachable or not valid JSON
        """
        if is_remote(self.source):
            return self._fetch_remote()
        return self._fetch_local()

    def _fetch_local(self) -> Any:
        path = Path(self.source)
        if not path.exists():
            raise CatalogLoadError(self.source, "file not found")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(self.source, f"invalid JSON: {e}")
        except OSError as e:
            raise CatalogLoadError(self.source, f"cannot read file: {e}")

    def _fetch_remote(self) -> Any:
        logger.info(f"Fetching catalog from {self.source}")
        try:
            response = self.session.get(self.source, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise CatalogLoadError(self.source, f"HTTP error: {e}")

        try:
            return response.json()
        except ValueError as e:
            raise CatalogLoadError(self.source, f"invalid JSON: {e}")

    def parse_document(self, data: Any) -> List[Game]:
        """
        Validate the document and flatten it into a sorted list of games.
        
        Args:
            data: Decoded catalog document
            
        Returns:
            Games sorted by name, each tagged with its category
            
        Raises:
            CatalogLoadError: If the document does not match the catalog schema
        """
        try:
            document = CatalogDocument.model_validate(data)
        except ValidationError as e:
            raise CatalogLoadError(self.source, f"invalid catalog document: {e}")

        games: List[Game] = []
        for category in document.categories:
            for game_doc in category.games:
                games.append(_convert_game(game_doc, category.name, category.id))

        # Stable sort keeps document order between games with equal names
        games.sort(key=lambda game: game.name.casefold())
        return games

    def load_catalog(self) -> GameCatalog:
        """
        Fetch and parse the catalog.
        
        Raises:
            CatalogLoadError: If the document cannot be fetched or parsed
        """
        games = self.parse_document(self.fetch_document())
        catalog = GameCatalog(games)
        logger.info(f"Loaded {len(catalog)} games from {len(catalog.get_categories())} categories")
        return catalog

    @handle_errors(default_return=None, message="Error loading games data")
    def load(self) -> Optional[GameCatalog]:
        """
        Load the catalog, reporting failure as ``None``.
        
        Returns:
            The loaded catalog, or None if loading failed
        """
        return self.load_catalog()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

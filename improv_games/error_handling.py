"""
Error types and handling helpers for the improv games package.

The query engine never raises; failures belong to catalog loading and are
reported upward as an absent result.
"""

import logging
from typing import Any, Callable, Optional, Tuple, Type
from functools import wraps

logger = logging.getLogger(__name__)


class ImprovGamesError(Exception):
    """Base class for errors raised by this package."""


class CatalogLoadError(ImprovGamesError):
    """The catalog document could not be fetched, decoded or validated."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load catalog from {source}: {reason}")


class GameNotFoundError(ImprovGamesError):
    """No game with the requested id exists in the catalog."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game not found: {game_id}")


def handle_errors(default_return: Any = None,
                  exceptions: Tuple[Type[BaseException], ...] = (Exception,),
                  message: Optional[str] = None,
                  log_error: bool = True):
    """
    Decorator turning the listed exceptions into ``default_return``.
    
    Args:
        default_return: Value to return on error
        exceptions: Exception types to intercept; anything else propagates
        message: Prefix for the logged error (defaults to the function name)
        log_error: Whether to log the error
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                if log_error:
                    prefix = message or f"Error in {func.__name__}"
                    logger.error(f"{prefix}: {e}")
                return default_return
        return wrapper
    return decorator

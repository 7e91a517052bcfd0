"""
Command-line interface for the improv games catalog.

This module provides CLI commands for:
- Searching and filtering games
- Showing a game's details
- Listing categories
"""

from .main import main

__all__ = [
    "main",
]

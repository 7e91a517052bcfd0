"""
Configuration settings for the improv games catalog.
"""

import os
from pathlib import Path

# Package paths; the bundled catalog ships as package data
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"
# Catalog document: a filesystem path or an http(s) URL
DATA_SOURCE = os.environ.get("IMPROV_GAMES_DATA", str(DATA_DIR / "mutgames.json"))
# Logs directory for per-run logs
LOGS_DIR = Path(os.environ.get("IMPROV_GAMES_LOGS_DIR", str(Path.home() / ".improv_games" / "logs")))

# HTTP configuration for remote catalogs
REQUEST_TIMEOUT = float(os.environ.get("IMPROV_GAMES_TIMEOUT", "10"))
USER_AGENT = "improv-games/0.1 (+catalog loader)"
RETRY_TOTAL = 3
RETRY_BACKOFF = 0.3
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]

# Difficulty levels in ascending order
DIFFICULTY_LEVELS = ["beginner", "intermediate", "advanced"]

# Text markers shown next to a game's difficulty
DIFFICULTY_MARKERS = {
    "beginner": "[*  ]",
    "intermediate": "[** ]",
    "advanced": "[***]",
}
DEFAULT_DIFFICULTY_MARKER = "[   ]"

# YouTube URL patterns for video links
YOUTUBE_ID_PATTERNS = [
    r"(?:https?://)?(?:www\.)?(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})",
    r"(?:https?://)?(?:www\.)?youtube\.com/embed/([^\"&?/\s]{11})",
]
YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"

NOT_SPECIFIED = "Not specified"

"""
Helper Functions

Contains utility functions used by the controllers.
"""

from typing import Any, Dict, Optional, Tuple

from ..errors import DailyAlreadyPlayed, GameNotStarted, GuessRejected, PersistenceError, WordleError
from ..models.game import GameMode


def parse_game_mode(value: Optional[str]) -> Optional[GameMode]:
    """Map a request's game_mode string to a GameMode, None if unknown."""
    if value is None:
        return GameMode.NORMAL
    try:
        return GameMode(str(value).upper())
    except ValueError:
        return None


def error_status(error: Exception) -> int:
    """HTTP status for an error raised by the game core."""
    if isinstance(error, (GuessRejected, DailyAlreadyPlayed)):
        return 400
    if isinstance(error, GameNotStarted):
        return 404
    if isinstance(error, PersistenceError):
        return 503
    return 500


def error_body(error: Exception) -> Tuple[Dict[str, Any], int]:
    """Response body and status for an error."""
    message = error.message if isinstance(error, WordleError) else str(error)
    return {
        'success': False,
        'error': message,
        'error_type': type(error).__name__
    }, error_status(error)

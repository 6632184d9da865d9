"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service
from .helpers import error_body, error_status, parse_game_mode
from .game_logger import game_logger

__all__ = ['require_game_service', 'error_body', 'error_status', 'parse_game_mode', 'game_logger']

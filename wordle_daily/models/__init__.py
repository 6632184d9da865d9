"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    CharacterGuess, GameMode, GameSnapshot, GameStatus, GuessRow, LetterState,
    is_word, normalize_word,
)
from .statistics import GameResultRecord, PlayerStatistics

__all__ = [
    'CharacterGuess', 'GameMode', 'GameSnapshot', 'GameStatus', 'GuessRow', 'LetterState',
    'is_word', 'normalize_word',
    'GameResultRecord', 'PlayerStatistics'
]

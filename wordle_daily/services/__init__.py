"""
Services Package

Contains all game logic and service classes.
"""

from .daily_challenge import already_played_today, daily_record, word_for_date
from .evaluator import evaluate_guess
from .game_service import GameService
from .game_session import GameSession
from .statistics_service import compute_statistics, load_player_statistics
from .statistics_store import (
    InMemoryStatisticsStore, MongoStatisticsStore, StatisticsStore, create_statistics_store,
)
from .word_bank import WordBank

__all__ = [
    'already_played_today', 'daily_record', 'word_for_date',
    'evaluate_guess',
    'GameService', 'GameSession',
    'compute_statistics', 'load_player_statistics',
    'InMemoryStatisticsStore', 'MongoStatisticsStore', 'StatisticsStore', 'create_statistics_store',
    'WordBank'
]

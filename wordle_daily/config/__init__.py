"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word list loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ATTEMPT_RANKS, MAX_ROUNDS, RANK_THRESHOLDS, WORD_LENGTH,
    get_word_statistics, load_word_list, validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'RANK_THRESHOLDS', 'ATTEMPT_RANKS',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics'
]

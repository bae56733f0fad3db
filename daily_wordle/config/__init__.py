"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (fixed at build time)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    CLEAR, COLORS_TO_EMOJI, EMPTY_CELL, ENTER, NUMBER_OF_TRIES, SHARE_TITLE, WORD_LIST,
    get_word_statistics, validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'NUMBER_OF_TRIES', 'ENTER', 'CLEAR', 'EMPTY_CELL', 'SHARE_TITLE', 'COLORS_TO_EMOJI',
    'WORD_LIST', 'validate_word_list_integrity', 'get_word_statistics'
]

"""
Services Package

Contains the game engine and the session service around it.
"""

from .game_engine import GameNotWonError, InvalidKeyError, WordleEngine, apply_key, color_of, share_text
from .game_service import GameNotFoundError, GameService, get_game_service, initialize_game_service
from .notifications import Notification, NotificationKind
from .word_selection import daily_config, day_of_year, select_daily_word

__all__ = [
    'WordleEngine', 'apply_key', 'color_of', 'share_text', 'InvalidKeyError', 'GameNotWonError',
    'GameService', 'GameNotFoundError', 'get_game_service', 'initialize_game_service',
    'Notification', 'NotificationKind',
    'daily_config', 'day_of_year', 'select_daily_word'
]

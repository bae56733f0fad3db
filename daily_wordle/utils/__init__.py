"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service, websocket_game_service_required
from .helpers import error_body, get_client_ip
from .game_logger import game_logger

__all__ = [
    'require_game_service', 'websocket_game_service_required',
    'error_body', 'get_client_ip', 'game_logger'
]

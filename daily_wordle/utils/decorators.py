"""
Service Decorators

Contains decorators that hand the game service to HTTP endpoints and
WebSocket handlers, answering with an error when it is not initialised.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit

from .helpers import error_body

SERVICE_UNAVAILABLE = 'Game service unavailable'


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed as the ``game_service`` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify(error_body(SERVICE_UNAVAILABLE)), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_service_required(f):
    """Decorator for WebSocket handlers that need the game service."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', error_body(SERVICE_UNAVAILABLE))
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function

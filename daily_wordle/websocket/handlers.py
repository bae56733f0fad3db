"""
WebSocket Event Handlers

Handles the on-screen keyboard events sent over Socket.IO. Every key press
is answered with the new game state, followed by any notification and
clipboard write it produced.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit

from ..controllers.game_controller import log_outcome_event
from ..services.game_engine import GameNotWonError, InvalidKeyError
from ..services.game_service import GameNotFoundError
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger
from ..utils.helpers import error_body, get_client_ip


def emit_outbox(notifications, clipboard):
    """Deliver queued notifications and clipboard writes to the calling client."""
    for notification in notifications:
        emit('notification', notification)
    for text in clipboard:
        emit('clipboard_write', {'text': text})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'socket_connect')

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Start a game on today's word and send its state."""
        try:
            game_id = game_service.create_new_game()
            state = game_service.get_game_state(game_id)

            game_logger.log_user_action(request, 'new_game', game_id)
            game_logger.log_game_event(game_id, 'game_created', get_client_ip())

            emit('game_state', {'game_id': game_id, 'state': asdict(state)})

        except Exception as e:
            game_logger.log_error(request, e, 'new_game')
            emit('error', error_body(e))

    @socketio.on('key_press')
    @websocket_game_service_required
    def handle_key_press(data=None, game_service=None):
        """Apply one key press from the on-screen keyboard."""
        if not isinstance(data, dict):
            emit('error', error_body('Payload must be an object'))
            return

        game_id = data.get('game_id')
        key = data.get('key')

        if not game_id or key is None:
            emit('error', error_body('Game ID and key are required'))
            return

        try:
            game_logger.log_user_action(request, 'key_press', game_id, key=key)

            outcome = game_service.press_key(game_id, key)

            emit('game_state', {
                'game_id': game_id,
                'result': outcome.result.value,
                'state': asdict(outcome.state)
            })
            emit_outbox(outcome.notifications, outcome.clipboard)
            log_outcome_event(game_id, outcome, get_client_ip())

        except GameNotFoundError:
            emit('error', error_body('Game not found'))

        except InvalidKeyError as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', error_body(e))

        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', error_body(e))

    @socketio.on('share_score')
    @websocket_game_service_required
    def handle_share_score(data=None, game_service=None):
        """Copy the emoji score of a won game to the client's clipboard."""
        if not isinstance(data, dict):
            emit('error', error_body('Payload must be an object'))
            return

        game_id = data.get('game_id')

        if not game_id:
            emit('error', error_body('Game ID is required'))
            return

        try:
            game_logger.log_user_action(request, 'share_score', game_id)

            outcome = game_service.share_score(game_id)

            emit_outbox(outcome.notifications, outcome.clipboard)
            game_logger.log_game_event(game_id, 'score_shared', get_client_ip())

        except GameNotFoundError:
            emit('error', error_body('Game not found'))

        except GameNotWonError as e:
            emit('error', error_body(e))

        except Exception as e:
            game_logger.log_error(request, e, 'share_score', game_id)
            emit('error', error_body(e))

"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, request, jsonify

from ..models.game import TransitionResult
from ..services.game_engine import GameNotWonError, InvalidKeyError
from ..services.game_service import GameNotFoundError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_body, get_client_ip

game_bp = Blueprint('game', __name__)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session on today's word."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        word = data.get('word')

        # Without ALLOW_CUSTOM_WORDS every game is on today's word
        if not current_app.config.get('ALLOW_CUSTOM_WORDS', False):
            word = None

        game_logger.log_user_action(request, 'new_game', custom_word=word is not None)

        game_id = game_service.create_new_game(word=word)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )
        game_logger.log_game_event(game_id, 'game_created', get_client_ip())

        return jsonify(response_data)

    except ValueError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = error_body(e)
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = error_body(e)
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_response = error_body('Game not found')
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, outcome=state.outcome
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = error_body(e)
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game_service
def press_key(game_id, game_service):
    """Apply one key press (a letter, ENTER or CLEAR) from the on-screen keyboard."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'key' not in data:
            error_response = error_body('Key is required')
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        outcome = game_service.press_key(game_id, key)

        response_data = {
            'success': True,
            'result': outcome.result.value,
            'state': asdict(outcome.state),
            'notifications': outcome.notifications,
            'clipboard': outcome.clipboard
        }

        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            result=outcome.result.value, row=outcome.state.current_row
        )
        log_outcome_event(game_id, outcome, get_client_ip())

        return jsonify(response_data)

    except GameNotFoundError as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = error_body('Game not found')
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 404

    except InvalidKeyError as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = error_body(e)
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = error_body(e)
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/share', methods=['POST'])
@require_game_service
def share_score(game_id, game_service):
    """Build the emoji score of a won game for the clipboard."""
    try:
        game_logger.log_user_action(request, 'share_score', game_id)

        outcome = game_service.share_score(game_id)

        response_data = {
            'success': True,
            'share_text': outcome.share_text,
            'notifications': outcome.notifications,
            'clipboard': outcome.clipboard
        }

        game_logger.log_server_response(request, 'share_score', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'score_shared', get_client_ip())

        return jsonify(response_data)

    except GameNotFoundError as e:
        game_logger.log_error(request, e, 'share_score', game_id)
        error_response = error_body('Game not found')
        game_logger.log_server_response(request, 'share_score', False, error_response, game_id)
        return jsonify(error_response), 404

    except GameNotWonError as e:
        game_logger.log_error(request, e, 'share_score', game_id)
        error_response = error_body(e)
        game_logger.log_server_response(request, 'share_score', False, error_response, game_id)
        return jsonify(error_response), 409

    except Exception as e:
        game_logger.log_error(request, e, 'share_score', game_id)
        error_response = error_body(e)
        game_logger.log_server_response(request, 'share_score', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', get_client_ip())
            return jsonify(response_data)

        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = error_body(e)
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500


def log_outcome_event(game_id, outcome, user_ip):
    """Record a win or a loss the moment a key press ends the game."""
    if outcome.result is TransitionResult.WON:
        game_logger.log_game_event(
            game_id, 'game_won', user_ip,
            rows_used=outcome.state.current_row, target_word=outcome.state.answer
        )
    elif outcome.result is TransitionResult.LOST:
        game_logger.log_game_event(
            game_id, 'game_lost', user_ip,
            rows_used=outcome.state.current_row, target_word=outcome.state.answer
        )

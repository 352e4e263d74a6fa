"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..exceptions import GameError
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _state_response(action, game_id, operation, **log_details):
    """
    Run ``operation`` and answer with the resulting game state.

    Game errors become ``{'success': False, 'error': message}`` with the
    error's status code, anything else is logged and answered with 500.
    """
    try:
        state = operation()
    except GameError as e:
        error_response = {
            'success': False,
            'error': e.message
        }
        game_logger.log_server_response(
            request, action, False, error_response, game_id,
            error_type=type(e).__name__, **log_details
        )
        return jsonify(error_response), e.status_code
    except Exception as e:
        game_logger.log_error(request, e, action, game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, action, False, error_response, game_id)
        return jsonify(error_response), 500

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': state.to_dict()
    }
    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        current_round=state.current_round, outcome=state.outcome.value
    )
    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500

    game_logger.log_user_action(request, 'new_game')

    try:
        game_id = game_service.create_new_game()
    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500

    return _state_response('new_game', game_id, lambda: game_service.get_game_state(game_id))


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_service, game_id):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)
    return _state_response('get_state', game_id, lambda: game_service.get_game_state(game_id))


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game
def enter_letter(game_service, game_id):
    """Append one letter to the current input."""
    data = request.get_json(silent=True) or {}
    letter = data.get('letter', '')
    game_logger.log_user_action(request, 'enter_letter', game_id, letter=letter)
    return _state_response('enter_letter', game_id,
                           lambda: game_service.enter_letter(game_id, letter))


@game_bp.route('/game/<game_id>/delete', methods=['POST'])
@require_game
def delete_letter(game_service, game_id):
    """Remove the last letter of the current input."""
    game_logger.log_user_action(request, 'delete_letter', game_id)
    return _state_response('delete_letter', game_id,
                           lambda: game_service.delete_letter(game_id))


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_service, game_id):
    """Forward a raw key press (letter, ENTER or BACKSPACE)."""
    data = request.get_json(silent=True) or {}
    key = data.get('key', '')
    game_logger.log_user_action(request, 'press_key', game_id, key=key)
    return _state_response('press_key', game_id,
                           lambda: game_service.press_key(game_id, key), key=key)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def submit_guess(game_service, game_id):
    """Submit the current input, or the word given in the body."""
    data = request.get_json(silent=True) or {}
    guess = data.get('guess')
    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)
    return _state_response('submit_guess', game_id,
                           lambda: game_service.submit_guess(game_id, guess),
                           attempted_guess=guess)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game
def restart_game(game_service, game_id):
    """Start a fresh round in the same session."""
    game_logger.log_user_action(request, 'restart_game', game_id)
    return _state_response('restart_game', game_id,
                           lambda: game_service.restart_game(game_id))


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_service, game_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    response_data = {
        'status': 'healthy',
        'games': len(game_service.games) if game_service else 0,
        'active_games': game_service.active_game_count() if game_service else 0,
        'dictionary_size': len(game_service.dictionary) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)

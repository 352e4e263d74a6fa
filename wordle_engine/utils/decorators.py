"""
Route Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import request, jsonify


def require_game(f):
    """
    Decorator for routes taking a ``game_id``.

    Answers 500 when the game service is not initialised and 404 when the game
    does not exist, so the view only handles live sessions.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service
        from .game_logger import game_logger

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        if not game_service.has_game(game_id):
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, f.__name__, False, error_response, game_id)
            return jsonify(error_response), 404

        return f(game_service, game_id, *args, **kwargs)

    return decorated_function

"""
WebSocket Event Handlers

Key presses arrive one at a time over Socket.IO. Every client subscribed to a
game (its room is the game id) receives the fresh snapshot after each handled
event; errors only go back to the client that caused them.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..exceptions import GameError, GameNotFound
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

INVALID_PAYLOAD = 'Invalid payload'


def _broadcast_state(game_id, state):
    emit('game_state', {'game_id': game_id, 'state': state.to_dict()}, to=game_id)


def _emit_error(game_id, message):
    emit('game_error', {'game_id': game_id, 'error': message})


def _payload(data, event):
    """Return the event payload as a dict, or None after replying with an error."""
    if data is None:
        return {}
    if isinstance(data, dict):
        return data
    game_logger.log_server_response(
        request, event, False, {'error': INVALID_PAYLOAD},
        payload_type=type(data).__name__
    )
    _emit_error(None, INVALID_PAYLOAD)
    return None


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'ws_connect')

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection. Game sessions outlive the socket."""
        game_logger.log_user_action(request, 'ws_disconnect')

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and subscribe this socket to its room."""
        if _payload(data, 'new_game') is None:
            return
        game_service = get_game_service()
        if not game_service:
            _emit_error(None, 'Game service unavailable')
            return

        game_id = game_service.create_new_game()
        join_room(game_id)
        game_logger.log_user_action(request, 'new_game', game_id, transport='websocket')
        _broadcast_state(game_id, game_service.get_game_state(game_id))

    @socketio.on('join_game')
    def handle_join_game(data=None):
        """Subscribe to an existing game and receive its current state."""
        data = _payload(data, 'join_game')
        if data is None:
            return
        game_id = data.get('game_id')
        game_service = get_game_service()
        if not game_service:
            _emit_error(game_id, 'Game service unavailable')
            return

        try:
            state = game_service.get_game_state(game_id)
        except GameNotFound as e:
            _emit_error(game_id, e.message)
            return

        join_room(game_id)
        game_logger.log_user_action(request, 'join_game', game_id, transport='websocket')
        emit('game_state', {'game_id': game_id, 'state': state.to_dict()})

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Stop receiving updates for a game."""
        data = _payload(data, 'leave_game')
        if data is None:
            return
        game_id = data.get('game_id')
        if game_id:
            leave_room(game_id)

    @socketio.on('key_press')
    def handle_key_press(data=None):
        """Forward one key press (letter, ENTER or BACKSPACE) to the game."""
        data = _payload(data, 'key_press')
        if data is None:
            return
        game_id = data.get('game_id')
        key = data.get('key', '')
        game_service = get_game_service()
        if not game_service:
            _emit_error(game_id, 'Game service unavailable')
            return

        game_logger.log_user_action(request, 'key_press', game_id, key=key, transport='websocket')
        try:
            state = game_service.press_key(game_id, key)
        except GameError as e:
            game_logger.log_server_response(
                request, 'key_press', False, {'error': e.message}, game_id,
                error_type=type(e).__name__
            )
            _emit_error(game_id, e.message)
            return

        # The typing client follows the game it plays
        join_room(game_id)
        _broadcast_state(game_id, state)

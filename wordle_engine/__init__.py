"""
Wordle Game Server Application Package

The ``services`` package holds the game rules (Dictionary, GameEngine) and the
session service. ``create_app`` wires them into a Flask application with a
JSON API and a Socket.IO key-press channel.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance and its SocketIO server
    """
    from .config.game_settings import load_word_list
    from .services.dictionary import Dictionary
    from .services.game_service import initialize_game_service
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config.get('LOG_DIR') or None, app.config.get('LOG_LEVEL', 'INFO'))

    # Build the dictionary and the session service
    word_length = app.config['WORD_LENGTH']
    dictionary = Dictionary(load_word_list(app.config['WORD_LIST_PATH'], word_length), word_length)
    initialize_game_service(
        dictionary,
        word_length=word_length,
        max_guesses=app.config['MAX_GUESSES'],
        validate_words=app.config['VALIDATE_WORDS'],
    )

    # Initialize extensions
    CORS(app, origins=app.config.get('CORS_ORIGINS', '*'))
    socketio = SocketIO(app, cors_allowed_origins=app.config.get('CORS_ORIGINS', '*'),
                        logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    app.socketio = socketio

    return app, socketio

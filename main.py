"""
Wordle Game Server - Main Entry Point

Creates the Flask-SocketIO application and starts serving.
"""

import os

from wordle_engine import create_app
from wordle_engine.config import config
from wordle_engine.services.game_service import get_game_service
from wordle_engine.utils.game_logger import game_logger


def main():
    """Main function to create the app and start the server."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])

    try:
        app, socketio = create_app(config_class)
        game_service = get_game_service()

        game_logger.logger.info(
            "Wordle Server Starting on %s:%s (words=%d, validate_words=%s)",
            config_class.HOST, config_class.PORT,
            len(game_service.dictionary), config_class.VALIDATE_WORDS
        )
        print(f"Starting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

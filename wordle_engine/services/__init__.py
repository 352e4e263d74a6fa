"""
Services Package

Contains the game rules and the session service.
"""

from .dictionary import Dictionary
from .game_engine import GameEngine, evaluate_guess, merge_keyboard
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'Dictionary',
    'GameEngine', 'evaluate_guess', 'merge_keyboard',
    'GameService', 'get_game_service', 'initialize_game_service'
]

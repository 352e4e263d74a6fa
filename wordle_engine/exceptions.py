"""
Game Errors

Recoverable conditions surfaced to the player as feedback. None of them leave
the game in a modified state.
"""


class GameError(Exception):
    """Base class for all game errors."""
    message = "Game error"
    status_code = 400

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class IncompleteGuess(GameError):
    message = "Not enough letters"
    status_code = 400


class WordNotInDictionary(GameError):
    message = "Not in word list"
    status_code = 422


class GameAlreadyFinished(GameError):
    message = "Game is already over"
    status_code = 409


class InvalidGuess(GameError):
    message = "Guess must contain only letters"
    status_code = 400


class GameNotFound(GameError):
    message = "Game not found"
    status_code = 404

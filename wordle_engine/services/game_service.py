"""
Game Service

Keeps one GameEngine per game session and translates client input into engine
operations.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..exceptions import GameAlreadyFinished, GameNotFound, InvalidGuess
from ..models.game import GameOutcome, GameState
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_key
from .dictionary import Dictionary
from .game_engine import ALPHABET, GameEngine


class GameService:
    """
    Game session manager.

    This class handles:
    - Game session management with unique game IDs
    - Mapping raw key presses onto the engine
    - Surfacing input on finished games as GameAlreadyFinished
    - Logging of won/lost transitions
    """

    def __init__(self, dictionary: Dictionary, word_length: int = WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES, validate_words: bool = True):
        self.dictionary = dictionary
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.validate_words = validate_words
        self.games: Dict[str, GameEngine] = {}
        self._game_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def create_new_game(self, secret_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Returns:
            str: Unique game ID for this session
        """
        engine = GameEngine(
            self.dictionary,
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            validate_words=self.validate_words,
            secret_word=secret_word,
        )
        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = engine
            self._game_locks[game_id] = threading.Lock()
        game_logger.log_game_event(game_id, 'game_created', word_length=self.word_length,
                                   max_guesses=self.max_guesses)
        return game_id

    def has_game(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self.games

    @contextmanager
    def _locked_engine(self, game_id: str, playable: bool = True) -> Iterator[GameEngine]:
        """
        Hold the game's own lock for the whole check-and-mutate sequence.

        Each engine is mutated by one request at a time; different games do
        not block each other.
        """
        if not isinstance(game_id, str):
            raise GameNotFound()
        with self._lock:
            engine = self.games.get(game_id)
            game_lock = self._game_locks.get(game_id)
        if engine is None or game_lock is None:
            raise GameNotFound()

        with game_lock:
            if playable and engine.is_over:
                raise GameAlreadyFinished()
            yield engine

    def get_game_state(self, game_id: str) -> GameState:
        """Returns the current snapshot (the answer stays hidden until the game is over)."""
        with self._locked_engine(game_id, playable=False) as engine:
            return engine.state

    def enter_letter(self, game_id: str, letter: str) -> GameState:
        with self._locked_engine(game_id) as engine:
            engine.enter_letter(letter)
            return engine.state

    def delete_letter(self, game_id: str) -> GameState:
        with self._locked_engine(game_id) as engine:
            engine.delete_letter()
            return engine.state

    def submit_guess(self, game_id: str, word: Optional[str] = None) -> GameState:
        """
        Submit the buffered input, or ``word`` when given.

        A whole word replaces the buffer first. The buffer is restored if the
        submission is rejected so a failed call leaves no trace.
        """
        normalized = None
        if word is not None:
            normalized = word.strip().upper() if isinstance(word, str) else ''
            if not normalized or not all(c in ALPHABET for c in normalized):
                raise InvalidGuess()
            if len(normalized) > self.word_length:
                raise InvalidGuess(f"Guess must be exactly {self.word_length} letters")

        with self._locked_engine(game_id) as engine:
            if normalized is None:
                engine.submit_guess()
            else:
                previous_input = engine.current_input
                self._replace_input(engine, normalized)
                try:
                    engine.submit_guess()
                except Exception:
                    self._replace_input(engine, previous_input)
                    raise

            self._log_outcome(game_id, engine)
            return engine.state

    def press_key(self, game_id: str, key: str) -> GameState:
        """Forward one raw key press (a letter, ENTER or BACKSPACE)."""
        key = normalize_key(key)
        if key == 'ENTER':
            return self.submit_guess(game_id)
        if key == 'BACKSPACE':
            return self.delete_letter(game_id)
        return self.enter_letter(game_id, key)

    def restart_game(self, game_id: str) -> GameState:
        with self._locked_engine(game_id, playable=False) as engine:
            engine.restart()
            game_logger.log_game_event(game_id, 'game_restarted')
            return engine.state

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            self._game_locks.pop(game_id, None)
            return self.games.pop(game_id, None) is not None

    def active_game_count(self) -> int:
        with self._lock:
            return sum(1 for engine in self.games.values() if not engine.is_over)

    @staticmethod
    def _replace_input(engine: GameEngine, word: str) -> None:
        while engine.delete_letter():
            pass
        for letter in word:
            engine.enter_letter(letter)

    def _log_outcome(self, game_id: str, engine: GameEngine) -> None:
        if engine.outcome is GameOutcome.WON:
            game_logger.log_game_event(
                game_id, 'game_won',
                rounds_used=len(engine.guesses), target_word=engine.secret_word
            )
        elif engine.outcome is GameOutcome.LOST:
            game_logger.log_game_event(
                game_id, 'game_lost',
                rounds_used=len(engine.guesses), target_word=engine.secret_word
            )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Dictionary, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, **kwargs)
    return _game_service

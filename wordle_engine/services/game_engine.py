"""
Game Engine

Single-round Wordle rules: guess evaluation, keyboard aggregation and the
in-progress/won/lost state machine. Pure logic, no I/O.
"""

from collections import Counter
from types import MappingProxyType
from typing import Dict, List, Mapping, MutableMapping, Optional, Tuple

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..exceptions import IncompleteGuess, WordNotInDictionary
from ..models.game import EvaluatedLetter, GameOutcome, GameState, Guess, LetterStatus
from .dictionary import Dictionary

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def evaluate_guess(candidate: str, secret: str) -> Guess:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their letter; the remaining
    positions are then marked PRESENT only while unconsumed copies of that
    letter are left in the secret.
    """
    candidate = candidate.upper()
    secret = secret.upper()
    if len(candidate) != len(secret):
        raise ValueError(
            f"Guess length {len(candidate)} does not match secret length {len(secret)}"
        )

    statuses: List[Optional[LetterStatus]] = [None] * len(secret)
    available = Counter(secret)

    # First pass: exact position matches
    for i, (guess_char, secret_char) in enumerate(zip(candidate, secret)):
        if guess_char == secret_char:
            statuses[i] = LetterStatus.CORRECT
            available[guess_char] -= 1

    # Second pass: present letters and misses
    for i, guess_char in enumerate(candidate):
        if statuses[i] is not None:
            continue
        if available[guess_char] > 0:
            statuses[i] = LetterStatus.PRESENT
            available[guess_char] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return Guess(tuple(
        EvaluatedLetter(character=char, status=status)
        for char, status in zip(candidate, statuses)
    ))


def merge_keyboard(keyboard: MutableMapping[str, LetterStatus], guess: Guess) -> None:
    """
    Fold a guess into the keyboard state in place.

    A key only moves up in precedence (CORRECT > PRESENT > ABSENT).
    """
    for letter in guess:
        if letter.status is LetterStatus.EMPTY:
            continue
        current = keyboard.get(letter.character)
        if current is None or letter.status.precedence > current.precedence:
            keyboard[letter.character] = letter.status


class GameEngine:
    """
    Owns one round: the secret word, the guess history, the uncommitted input
    and the derived keyboard.

    Input handling never raises: letters beyond the word length, non-letters
    and any input after the round has ended are ignored. ``submit_guess`` is
    the only operation that reports errors, and it leaves the state untouched
    when it does.
    """

    def __init__(self, dictionary: Optional[Dictionary] = None,
                 word_length: int = WORD_LENGTH, max_guesses: int = MAX_GUESSES,
                 validate_words: bool = False, secret_word: Optional[str] = None):
        if word_length < 1:
            raise ValueError("word_length must be >= 1")
        if max_guesses < 1:
            raise ValueError("max_guesses must be >= 1")

        self.word_length = word_length
        self.max_guesses = max_guesses
        self.validate_words = validate_words
        self.dictionary = dictionary if dictionary is not None else Dictionary(word_length=word_length)

        self._secret = ""
        self._history: List[Guess] = []
        self._input: List[str] = []
        self._keyboard: Dict[str, LetterStatus] = {}
        self._outcome = GameOutcome.IN_PROGRESS
        self._start_round(secret_word)

    def _start_round(self, secret_word: Optional[str] = None) -> None:
        secret = (secret_word or self.dictionary.random_word()).strip().upper()
        if len(secret) != self.word_length or not all(c in ALPHABET for c in secret):
            raise ValueError(f"Secret word must be {self.word_length} letters A-Z, got {secret!r}")

        self._secret = secret
        self._history = []
        self._input = []
        self._keyboard = {}
        self._outcome = GameOutcome.IN_PROGRESS

    # Read accessors

    @property
    def secret_word(self) -> str:
        return self._secret

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def current_input(self) -> str:
        return "".join(self._input)

    @property
    def keyboard(self) -> Mapping[str, LetterStatus]:
        return MappingProxyType(dict(self._keyboard))

    @property
    def outcome(self) -> GameOutcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome is not GameOutcome.IN_PROGRESS

    @property
    def remaining_guesses(self) -> int:
        return self.max_guesses - len(self._history)

    @property
    def state(self) -> GameState:
        return GameState(
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            current_input=self.current_input,
            guesses=self.guesses,
            keyboard=self.keyboard,
            outcome=self._outcome,
            answer=self._secret if self.is_over else None,
        )

    # Input

    def enter_letter(self, ch: str) -> bool:
        """Append a letter to the current input. Returns False if ignored."""
        if self.is_over or len(self._input) >= self.word_length:
            return False
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        ch = ch.upper()
        if ch not in ALPHABET:
            return False
        self._input.append(ch)
        return True

    def delete_letter(self) -> bool:
        """Remove the last letter of the current input. Returns False if ignored."""
        if self.is_over or not self._input:
            return False
        self._input.pop()
        return True

    def submit_guess(self) -> Optional[Guess]:
        """
        Commit the current input as a guess.

        Returns:
            The evaluated Guess, or None when the round is already over

        Raises:
            IncompleteGuess: fewer than ``word_length`` letters entered
            WordNotInDictionary: word validation is on and the word is unknown
        """
        if self.is_over:
            return None

        word = self.current_input
        if len(word) != self.word_length:
            raise IncompleteGuess()
        if self.validate_words and not self.dictionary.contains(word):
            raise WordNotInDictionary()

        guess = evaluate_guess(word, self._secret)
        self._history.append(guess)
        merge_keyboard(self._keyboard, guess)
        self._input = []

        if guess.is_win:
            self._outcome = GameOutcome.WON
        elif len(self._history) >= self.max_guesses:
            self._outcome = GameOutcome.LOST
        return guess

    def restart(self, secret_word: Optional[str] = None) -> None:
        """Start a fresh round with a new secret word."""
        self._start_round(secret_word)

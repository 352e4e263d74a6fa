"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status, ordered by keyboard precedence."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    EMPTY = "EMPTY"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]


_PRECEDENCE: Dict[LetterStatus, int] = {
    LetterStatus.CORRECT: 3,
    LetterStatus.PRESENT: 2,
    LetterStatus.ABSENT: 1,
    LetterStatus.EMPTY: 0,
}


class GameOutcome(Enum):
    """Round classification."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class EvaluatedLetter:
    """One classified position of a submitted guess."""
    character: str
    status: LetterStatus


@dataclass(frozen=True)
class Guess:
    """A submitted, fully evaluated attempt."""
    letters: Tuple[EvaluatedLetter, ...]

    @property
    def word(self) -> str:
        return "".join(letter.character for letter in self.letters)

    @property
    def is_win(self) -> bool:
        return bool(self.letters) and all(
            letter.status is LetterStatus.CORRECT for letter in self.letters
        )

    def __iter__(self) -> Iterator[EvaluatedLetter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def to_list(self):
        return [[letter.character, letter.status.value] for letter in self.letters]


@dataclass(frozen=True)
class GameState:
    """
    Read-only snapshot of a round.

    The answer is only filled in once the round is over so the snapshot can be
    handed to clients as-is.
    """
    word_length: int
    max_guesses: int
    current_input: str
    guesses: Tuple[Guess, ...]
    keyboard: Mapping[str, LetterStatus] = field(default_factory=lambda: MappingProxyType({}))
    outcome: GameOutcome = GameOutcome.IN_PROGRESS
    answer: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS

    @property
    def current_round(self) -> int:
        return len(self.guesses)

    def to_dict(self) -> Dict:
        """Render a JSON-safe dict for the HTTP and WebSocket layers."""
        return {
            "word_length": self.word_length,
            "max_guesses": self.max_guesses,
            "current_round": self.current_round,
            "current_input": self.current_input,
            "guesses": [guess.word for guess in self.guesses],
            "guess_results": [guess.to_list() for guess in self.guesses],
            "keyboard": {letter: status.value for letter, status in sorted(self.keyboard.items())},
            "outcome": self.outcome.value,
            "game_over": self.game_over,
            "won": self.outcome is GameOutcome.WON,
            "answer": self.answer,
        }

"""
Dictionary

Immutable pool of valid fixed-length words.
"""

import random
from typing import FrozenSet, Iterable, Optional, Tuple

from ..config.game_settings import FALLBACK_WORD, WORD_LENGTH, normalize_words


class Dictionary:
    """
    Pool of acceptable words used for secret selection and guess validation.

    Words are normalised to upper case and filtered to ``word_length`` letters.
    An empty pool is allowed: ``random_word`` then returns the fallback word so
    an engine stays playable when the word list failed to load.
    """

    def __init__(self, words: Iterable[str] = (), word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None, fallback_word: str = FALLBACK_WORD):
        self.word_length = word_length
        self._ordered: Tuple[str, ...] = tuple(normalize_words(words, word_length))
        self._words: FrozenSet[str] = frozenset(self._ordered)
        self._rng = rng or random.Random()
        self.fallback_word = fallback_word.upper()

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test. Wrong-length words are never members."""
        if not isinstance(word, str) or len(word) != self.word_length:
            return False
        return word.upper() in self._words

    def random_word(self) -> str:
        """Uniformly pick a word, or the fallback word if the pool is empty."""
        if not self._ordered:
            return self.fallback_word
        return self._rng.choice(self._ordered)

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"Dictionary(words={len(self)}, word_length={self.word_length})"

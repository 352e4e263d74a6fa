"""
Game Configuration Constants Module

Game rule constants and the word-list loader. The engine itself never touches
the filesystem; it receives a Dictionary built from whatever this module loads.
"""

import json
import logging
import os
from typing import Final, Iterable, List, Optional

logger = logging.getLogger(__name__)

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and guess."""

MAX_GUESSES: Final[int] = 6
"""Maximum number of guess attempts allowed per game."""

FALLBACK_WORD: Final[str] = "SWORD"
"""Secret word used when the dictionary pool is empty."""

FALLBACK_WORDS: Final[List[str]] = ["SWORD", "APPLE", "HOUSE", "PIANO", "TIGER"]
"""Word list used when the word-list file is missing or unreadable."""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def normalize_words(words: Iterable[str], word_length: int = WORD_LENGTH) -> List[str]:
    """
    Upper-case, strip and filter raw words.

    Only alphabetic words of exactly ``word_length`` letters survive. Duplicates
    are dropped, first occurrence wins.
    """
    seen = set()
    result = []
    for raw in words:
        if not isinstance(raw, str):
            continue
        word = raw.strip().upper()
        if len(word) != word_length or not word.isalpha() or not word.isascii():
            continue
        if word in seen:
            continue
        seen.add(word)
        result.append(word)
    return result


def _read_raw_words(path: str) -> List[str]:
    with open(path, 'r', encoding='utf-8') as f:
        if path.endswith('.json'):
            data = json.load(f)
            if not isinstance(data, list):
                raise ValueError("JSON file must contain an array of words")
            return data
        return f.read().splitlines()


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load the word list from a JSON array or a newline separated text file.

    Args:
        path: File to read, defaults to the bundled ``wordles.json``
        word_length: Only words of this length are kept

    Returns:
        List[str]: Upper-case words, or FALLBACK_WORDS when the file is missing,
        malformed or holds no usable word
    """
    path = path or DEFAULT_WORD_LIST_PATH

    try:
        words = normalize_words(_read_raw_words(path), word_length)
    except FileNotFoundError:
        logger.warning("Word list file not found: %s, using fallback words", path)
        return list(FALLBACK_WORDS)
    except (json.JSONDecodeError, ValueError, OSError) as e:
        logger.warning("Failed to load word list %s (%s), using fallback words", path, e)
        return list(FALLBACK_WORDS)

    if not words:
        logger.warning("Word list %s has no %d-letter words, using fallback words", path, word_length)
        return list(FALLBACK_WORDS)

    logger.info("Loaded %d words from %s", len(words), path)
    return words

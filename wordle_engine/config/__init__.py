"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word-list loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    FALLBACK_WORD, FALLBACK_WORDS, MAX_GUESSES, WORD_LENGTH, load_word_list, normalize_words
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'FALLBACK_WORD', 'FALLBACK_WORDS',
    'load_word_list', 'normalize_words'
]

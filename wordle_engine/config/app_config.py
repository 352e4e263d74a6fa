"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_WORD_LIST_PATH, MAX_GUESSES, WORD_LENGTH

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_bool('DEBUG', 'False')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', WORD_LENGTH))
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', MAX_GUESSES))
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', DEFAULT_WORD_LIST_PATH)
    VALIDATE_WORDS = _env_bool('VALIDATE_WORDS', 'True')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_DIR = ''
    WORD_LENGTH = 5
    MAX_GUESSES = 6
    VALIDATE_WORDS = True
    WORD_LIST_PATH = DEFAULT_WORD_LIST_PATH


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

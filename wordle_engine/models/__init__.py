"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import EvaluatedLetter, GameOutcome, GameState, Guess, LetterStatus

__all__ = ['EvaluatedLetter', 'GameOutcome', 'GameState', 'Guess', 'LetterStatus']

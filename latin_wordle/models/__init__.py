"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .errors import EmptyDictionaryError, GuessLengthError, PreconditionViolation, RoundOverError
from .game import GameState, LetterStatus, Outcome, RoundState, WordData, WordEntry

__all__ = [
    'GameState', 'LetterStatus', 'Outcome', 'RoundState', 'WordData', 'WordEntry',
    'PreconditionViolation', 'EmptyDictionaryError', 'GuessLengthError', 'RoundOverError'
]

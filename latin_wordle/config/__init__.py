"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word dictionary (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORDS, GUESS_LENGTH, NUM_OF_GUESSES_ALLOWED,
    load_word_dictionary, validate_dictionary_integrity, get_dictionary_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORDS', 'GUESS_LENGTH', 'NUM_OF_GUESSES_ALLOWED',
    'load_word_dictionary', 'validate_dictionary_integrity', 'get_dictionary_statistics'
]

"""
Services Package

Contains the game engine and the business logic services built on it.
"""

from .evaluator import evaluate_guess, summarize_letter_status
from .game_engine import evaluate_history, reset_round, start_round, submit_guess
from .game_service import GameService, get_game_service, initialize_game_service
from .word_sampler import sample_word

__all__ = [
    'evaluate_guess', 'summarize_letter_status',
    'start_round', 'submit_guess', 'reset_round', 'evaluate_history',
    'GameService', 'get_game_service', 'initialize_game_service',
    'sample_word'
]

"""
Game Engine

Round state machine: IN_PROGRESS -> WON | LOST, left only by a reset.

Every function takes a RoundState and returns a new one. Nothing here holds
a "current round"; whoever hosts the session owns the value.
"""

from dataclasses import replace
from typing import List, Mapping, Optional

from ..config.game_settings import NUM_OF_GUESSES_ALLOWED
from ..models.errors import RoundOverError
from ..models.game import Outcome, RoundState, WordData
from ..utils.normalize import normalize_diacritics
from .evaluator import LetterEvaluation, evaluate_guess, is_winning_evaluation
from .word_sampler import sample_word


def start_round(dictionary: Mapping[str, WordData],
                rng=None,
                max_guesses: int = NUM_OF_GUESSES_ALLOWED) -> RoundState:
    """
    Creates a fresh round with a newly drawn answer.

    Args:
        dictionary: Normalized word -> metadata mapping
        rng: Optional random source passed to the sampler
        max_guesses: Guess ceiling for the round

    Returns:
        RoundState: In progress, with no guesses
    """
    return RoundState(answer=sample_word(dictionary, rng), max_guesses=max_guesses)


def reset_round(dictionary: Mapping[str, WordData],
                rng=None,
                max_guesses: int = NUM_OF_GUESSES_ALLOWED) -> RoundState:
    """Discards the old round entirely and starts a new one."""
    return start_round(dictionary, rng, max_guesses)


def submit_guess(state: RoundState, raw_input: str) -> RoundState:
    """
    Records a guess and decides whether the round ends.

    The normalized guess is appended whatever the result, including the
    guess that wins or loses the round.

    Args:
        state: A round that is still in progress
        raw_input: The guess as typed, diacritics and case allowed

    Returns:
        RoundState: The updated round

    Raises:
        RoundOverError: If the round already has an outcome
        GuessLengthError: If the normalized guess has the wrong length
    """
    if state.is_over:
        raise RoundOverError(state.outcome)

    guess = normalize_diacritics(raw_input)
    evaluation = evaluate_guess(guess, state.answer.word)
    guesses = state.guesses + (guess,)

    outcome: Optional[Outcome] = None
    if is_winning_evaluation(evaluation):
        outcome = Outcome.WIN
    elif len(guesses) >= state.max_guesses:
        outcome = Outcome.LOSE

    return replace(state, guesses=guesses, outcome=outcome)


def evaluate_history(state: RoundState) -> List[List[LetterEvaluation]]:
    """Evaluates every recorded guess against the round's answer, in order."""
    return [evaluate_guess(guess, state.answer.word) for guess in state.guesses]

"""
Guess Evaluator

Scores a guess against the answer letter by letter.
"""

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from ..models.errors import GuessLengthError
from ..models.game import LetterStatus

LetterEvaluation = Tuple[str, LetterStatus]

_STATUS_PRIORITY = {
    LetterStatus.INCORRECT: 0,
    LetterStatus.MISPLACED: 1,
    LetterStatus.CORRECT: 2,
}


def evaluate_guess(guess: str, answer: str) -> List[LetterEvaluation]:
    """
    Implements the two-pass Wordle evaluation.

    Exact matches are resolved first and consume their letter from the
    answer. Remaining positions are then scanned left to right, and a
    letter is MISPLACED only while the answer still has an unconsumed
    occurrence of it. Both arguments must already be normalized.

    Args:
        guess: The submitted word
        answer: The secret word

    Returns:
        List of (letter, status) pairs in guess order

    Raises:
        GuessLengthError: If guess and answer differ in length
    """
    if len(guess) != len(answer):
        raise GuessLengthError(guess, answer)

    statuses: List[LetterStatus] = [LetterStatus.INCORRECT] * len(guess)
    available = Counter(answer)

    # First pass: exact position matches
    for i, (letter, target) in enumerate(zip(guess, answer)):
        if letter == target:
            statuses[i] = LetterStatus.CORRECT
            available[letter] -= 1

    # Second pass: letters present elsewhere in the answer
    for i, letter in enumerate(guess):
        if statuses[i] is LetterStatus.CORRECT:
            continue
        if available[letter] > 0:
            statuses[i] = LetterStatus.MISPLACED
            available[letter] -= 1

    return list(zip(guess, statuses))


def is_winning_evaluation(evaluation: Iterable[LetterEvaluation]) -> bool:
    return all(status is LetterStatus.CORRECT for _, status in evaluation)


def summarize_letter_status(evaluations: Iterable[Iterable[LetterEvaluation]]) -> Dict[str, LetterStatus]:
    """
    Folds evaluation results into the best status seen for each letter.

    Used to colour an on-screen keyboard. A letter's status only ever
    improves: INCORRECT < MISPLACED < CORRECT.
    """
    summary: Dict[str, LetterStatus] = {}
    for evaluation in evaluations:
        for letter, status in evaluation:
            current = summary.get(letter)
            if current is None or _STATUS_PRIORITY[status] > _STATUS_PRIORITY[current]:
                summary[letter] = status
    return summary

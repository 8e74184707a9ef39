"""
Engine Errors

Precondition violations raised by the game engine. These signal programmer
error: callers are expected to filter input before it reaches the engine.
"""


class PreconditionViolation(ValueError):
    """Base class for engine precondition violations."""


class EmptyDictionaryError(PreconditionViolation):
    """Raised when a word has to be drawn from an empty dictionary."""

    def __init__(self, message: str = "Dictionary contains no words"):
        super().__init__(message)


class GuessLengthError(PreconditionViolation):
    """Raised when a guess and the answer differ in length."""

    def __init__(self, guess: str, answer: str):
        self.guess = guess
        self.answer_length = len(answer)
        super().__init__(
            f"Guess '{guess}' has {len(guess)} letters, expected {len(answer)}"
        )


class RoundOverError(PreconditionViolation):
    """Raised when a guess is submitted to a round that already ended."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(f"Round is already over ({outcome.value})")

"""
Game Service

Hosts game sessions. Each session owns exactly one RoundState, which is
replaced (never edited) by every guess and reset.
"""

import threading
import uuid
from typing import Dict, Mapping, Optional, Tuple

from ..config.game_settings import WORDS, GUESS_LENGTH, NUM_OF_GUESSES_ALLOWED
from ..models.game import GameState, RoundState, WordData
from ..utils.game_logger import game_logger
from ..utils.normalize import normalize_diacritics
from .evaluator import summarize_letter_status
from .game_engine import evaluate_history, reset_round, start_round, submit_guess


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Answer selection and secure answer storage
    - Guess validation at the input boundary
    - Game state views that only reveal the answer once a round is over
    """

    def __init__(self,
                 dictionary: Optional[Mapping[str, WordData]] = None,
                 rng=None,
                 max_guesses: int = NUM_OF_GUESSES_ALLOWED):
        self.dictionary = dict(WORDS if dictionary is None else dictionary)
        self.rng = rng
        self.max_guesses = max_guesses
        self.games: Dict[str, RoundState] = {}  # Active rounds by game_id
        self._lock = threading.Lock()

    def has_game(self, game_id: str) -> bool:
        return game_id in self.games

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected answer.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        round_state = start_round(self.dictionary, self.rng, self.max_guesses)

        with self._lock:
            self.games[game_id] = round_state

        game_logger.logger.debug(f"Game {game_id}: answer is {round_state.answer.word}")
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        The answer and its metadata are only included once the round is over.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        round_state = self.games.get(game_id)
        if round_state is None:
            return None

        return self._build_game_state(game_id, round_state)

    def _build_game_state(self, game_id: str, round_state: RoundState) -> GameState:
        evaluations = evaluate_history(round_state)
        letter_status = summarize_letter_status(evaluations)

        answer = None
        word_data = None
        if round_state.is_over:
            answer = round_state.answer.word
            word_data = round_state.answer.data.to_dict()

        return GameState(
            game_id=game_id,
            current_round=len(round_state.guesses),
            max_rounds=round_state.max_guesses,
            word_length=GUESS_LENGTH,
            game_over=round_state.is_over,
            won=round_state.won,
            outcome=round_state.outcome.value if round_state.outcome else None,
            guesses=list(round_state.guesses),
            guess_results=[[(letter, status.value) for letter, status in evaluation]
                           for evaluation in evaluations],
            letter_status={letter: status.value for letter, status in letter_status.items()},
            answer=answer,
            word_data=word_data
        )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word as typed by the player

        Returns:
            Tuple of (is_valid, error_message)
        """
        round_state = self.games.get(game_id)
        if round_state is None:
            return False, "Game not found"

        if round_state.is_over:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = normalize_diacritics(guess)

        if len(normalized_guess) != GUESS_LENGTH:
            return False, f"Guess must be exactly {GUESS_LENGTH} letters"

        if not normalized_guess.isalpha():
            return False, "Guess must contain only letters"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The word as typed by the player

        Returns:
            Updated GameState or None if invalid
        """
        with self._lock:
            is_valid, _ = self.is_valid_guess(game_id, guess)
            if not is_valid:
                return None

            round_state = submit_guess(self.games[game_id], guess)
            self.games[game_id] = round_state

        return self._build_game_state(game_id, round_state)

    def reset_game(self, game_id: str) -> Optional[GameState]:
        """
        Replaces a session's round with a fresh one.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState of the new round, or None if game not found
        """
        with self._lock:
            if game_id not in self.games:
                return None

            round_state = reset_round(self.dictionary, self.rng, self.max_guesses)
            self.games[game_id] = round_state

        game_logger.logger.debug(f"Game {game_id}: answer is {round_state.answer.word}")
        return self._build_game_state(game_id, round_state)

    def get_hint(self, game_id: str) -> Optional[Dict[str, str]]:
        """
        Returns the answer's meaning without revealing the answer itself.

        Only available while the round is in progress.

        Args:
            game_id: Unique game identifier

        Returns:
            Dict with meaning, part and pronunciation, or None if game not found
            or the round is over
        """
        round_state = self.games.get(game_id)
        if round_state is None or round_state.is_over:
            return None

        data = round_state.answer.data
        return {
            'meaning': data.meaning,
            'part': data.part,
            'pronunciation': data.pronunciation
        }

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[Mapping[str, WordData]] = None,
                            rng=None,
                            max_guesses: int = NUM_OF_GUESSES_ALLOWED) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, rng, max_guesses)
    return _game_service

"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter evaluation of a guess against the answer."""
    CORRECT = "correct"
    MISPLACED = "misplaced"
    INCORRECT = "incorrect"


class Outcome(Enum):
    """Final result of a round."""
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class WordData:
    """Dictionary metadata describing a Latin word."""
    original: str
    meaning: str
    part: str
    pronunciation: str = ""

    @classmethod
    def from_dict(cls, word: str, data: Dict) -> "WordData":
        """
        Builds a record from a raw dictionary value.

        Missing fields are resolved here, once, so nothing downstream has
        to guess at the shape of the metadata.
        """
        return cls(
            original=data.get("original") or word,
            meaning=data.get("meaning") or "",
            part=data.get("part") or "",
            pronunciation=data.get("pronunciation") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "original": self.original,
            "meaning": self.meaning,
            "part": self.part,
            "pronunciation": self.pronunciation,
        }


@dataclass(frozen=True)
class WordEntry:
    """A normalized answer word paired with its metadata."""
    word: str
    data: WordData


@dataclass(frozen=True)
class RoundState:
    """
    One round of play.

    Immutable: every transition produces a new RoundState, and a reset
    replaces it wholesale.
    """
    answer: WordEntry
    max_guesses: int
    guesses: Tuple[str, ...] = field(default_factory=tuple)
    outcome: Optional[Outcome] = None

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def won(self) -> bool:
        return self.outcome is Outcome.WIN

    @property
    def lost(self) -> bool:
        return self.outcome is Outcome.LOSE


@dataclass
class GameState:
    """Client-facing game state representation."""
    game_id: str
    current_round: int
    max_rounds: int
    word_length: int
    game_over: bool
    won: bool
    outcome: Optional[str]
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
    word_data: Optional[Dict[str, str]] = None  # Only included when game is over

"""
Game Configuration Constants Module

This module defines the game rules and loads the Latin word dictionary.
The rules are fixed constants; only the dictionary location comes from the
environment.
"""

import json
import sys
from typing import Dict, Final, Mapping, Optional

from ..models.errors import EmptyDictionaryError
from ..models.game import WordData
from ..utils.normalize import normalize_diacritics
from .app_config import Config

# Core Game Configuration Constants
GUESS_LENGTH: Final[int] = 5
"""Number of letters in every answer and guess."""

NUM_OF_GUESSES_ALLOWED: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""


def load_word_dictionary(path: str) -> Dict[str, WordData]:
    """
    Load the game dictionary from a JSON file produced by the dictionary builder.

    Returns:
        Dict[str, WordData]: Normalized 5-letter word -> metadata

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed or an entry is invalid
        EmptyDictionaryError: If the file holds no words
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("Dictionary file must contain an object keyed by word")

    if not raw:
        raise EmptyDictionaryError(f"Dictionary file {path} contains no words")

    dictionary = {word: WordData.from_dict(word, data or {}) for word, data in raw.items()}
    validate_dictionary_integrity(dictionary)
    return dictionary


def validate_dictionary_integrity(dictionary: Mapping[str, WordData]) -> bool:
    """
    Validates the integrity and consistency of the word dictionary.

    This function performs validation to ensure:
    1. Length validation: All keys must be exactly GUESS_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Keys are already in normalized (uppercase, no diacritics) form

    Returns:
        bool: True if the dictionary passes all validation checks

    Raises:
        EmptyDictionaryError: If the dictionary is empty
        ValueError: If any validation check fails with detailed error message
    """
    if not dictionary:
        raise EmptyDictionaryError()

    for word in dictionary:
        if len(word) != GUESS_LENGTH:
            raise ValueError(f"Word '{word}' is not {GUESS_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

        if normalize_diacritics(word) != word:
            raise ValueError(f"Word '{word}' is not in normalized uppercase form")

    return True


def get_dictionary_statistics(dictionary: Mapping[str, WordData]) -> dict:
    """
    Analyzes the dictionary and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the dictionary
            - avg_vowel_count: Average vowels per word
            - parts_of_speech: Number of words per part of speech
            - most_common_letters: Five most frequent letters
    """
    if not dictionary:
        return {"error": "Dictionary is empty"}

    vowels = set('AEIOUY')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in dictionary)

    letter_frequency = {}
    parts_of_speech = {}
    for word, data in dictionary.items():
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
        part = data.part or 'Unknown'
        parts_of_speech[part] = parts_of_speech.get(part, 0) + 1

    return {
        "total_words": len(dictionary),
        "avg_vowel_count": round(total_vowels / len(dictionary), 2),
        "parts_of_speech": parts_of_speech,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Latin word dictionary loaded from JSON file
WORDS: Final[Dict[str, WordData]] = load_word_dictionary(Config.DICTIONARY_PATH)


def main(dictionary: Optional[Mapping[str, WordData]] = None) -> int:
    dictionary = WORDS if dictionary is None else dictionary

    try:
        validate_dictionary_integrity(dictionary)
        print(" Dictionary validation passed")

        stats = get_dictionary_statistics(dictionary)
        print(f" Dictionary statistics: {stats}")
        return 0
    except ValueError as config_error:
        print(f" Dictionary validation failed: {config_error}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

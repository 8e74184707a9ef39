"""
Word Sampler

Draws the secret answer for a round from the game dictionary.
"""

import random
from typing import Mapping

from ..models.errors import EmptyDictionaryError
from ..models.game import WordData, WordEntry


def sample_word(dictionary: Mapping[str, WordData], rng=None) -> WordEntry:
    """
    Selects one dictionary entry uniformly at random.

    Args:
        dictionary: Normalized word -> metadata mapping
        rng: Optional source of randomness exposing ``choice``; defaults to
            the ``random`` module

    Returns:
        WordEntry: The drawn word and its metadata

    Raises:
        EmptyDictionaryError: If the dictionary has no entries
    """
    if not dictionary:
        raise EmptyDictionaryError()

    source = rng if rng is not None else random
    word = source.choice(list(dictionary))
    return WordEntry(word=word, data=dictionary[word])

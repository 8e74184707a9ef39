"""
Text Normalization

Folds Latin diacritics so a learner can type "mōtum" and still match MOTUM.
"""

import re
import unicodedata
from typing import Optional

# Combining Diacritical Marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize_diacritics(text: Optional[str]) -> str:
    """
    Strips diacritics, uppercases and trims text.

    Uppercasing happens before decomposition: a few characters only gain
    a combining mark when uppercased, and stripping afterwards keeps the
    function idempotent.

    Args:
        text: Raw text, possibly empty or None

    Returns:
        str: Canonical comparison form ("" for empty input)
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.upper())
    return _COMBINING_MARKS.sub("", decomposed).strip()


def words_match(first: Optional[str], second: Optional[str]) -> bool:
    """Checks whether two words are equal once diacritics and case are ignored."""
    return normalize_diacritics(first) == normalize_diacritics(second)

import pytest

from latin_wordle.utils.normalize import normalize_diacritics, words_match


@pytest.mark.parametrize("raw, expected", [
    ("mōtum", "MOTUM"),
    ("MOTUM", "MOTUM"),
    ("lītus", "LITUS"),
    ("  hodiē ", "HODIE"),
    ("Virgō", "VIRGO"),
    ("ăĕĭŏŭ", "AEIOU"),
    ("terra", "TERRA"),
])
def test_normalize_folds_diacritics_and_case(raw, expected):
    assert normalize_diacritics(raw) == expected


def test_decomposed_input_matches_composed_input():
    composed = "mōtum"
    decomposed = "mo\u0304tum"
    assert normalize_diacritics(composed) == normalize_diacritics(decomposed) == "MOTUM"


@pytest.mark.parametrize("empty", [None, "", "   "])
def test_empty_input_yields_empty_string(empty):
    assert normalize_diacritics(empty) == ""


@pytest.mark.parametrize("raw", ["mōtum", " Ærumna ", "ǰūs", "straße", "hodiē", "", "ŌRĀTIŌ"])
def test_normalize_is_idempotent(raw):
    once = normalize_diacritics(raw)
    assert normalize_diacritics(once) == once


def test_words_match_ignores_diacritics_and_case():
    assert words_match("mōtum", "MOTUM")
    assert words_match("Lītus", "litus")
    assert not words_match("mōtum", "votum")

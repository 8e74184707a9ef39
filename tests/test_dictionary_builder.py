import pytest
import requests

from latin_wordle.config import load_word_dictionary
from latin_wordle.models import EmptyDictionaryError
from latin_wordle.services import dictionary_builder
from latin_wordle.services.dictionary_builder import (
    NO_TRANSLATION, UNKNOWN_PART, build_game_dictionary, fetch_source_dictionary, write_game_dictionary
)

SOURCE = {
    "mōtum": {"meaning": "moved", "part": "Verb", "pronunciation": "ˈmoː.tʊm"},
    "terra": {"meaning": "earth", "part": "Noun"},
    "lītus": {"ipa": "ˈliː.tʊs"},
    "aqua": {"meaning": "water", "part": "Noun"},
    "puella": {"meaning": "girl", "part": "Noun"},
    "ab-ex": {"meaning": "not a word"},
}


def test_build_keeps_five_letter_normalized_words():
    entries = build_game_dictionary(SOURCE)
    assert set(entries) == {"MOTUM", "TERRA", "LITUS"}
    assert entries["MOTUM"].original == "mōtum"
    assert entries["MOTUM"].pronunciation == "ˈmoː.tʊm"


def test_build_fills_placeholders():
    litus = build_game_dictionary(SOURCE)["LITUS"]
    assert litus.meaning == NO_TRANSLATION
    assert litus.part == UNKNOWN_PART
    assert litus.pronunciation == "ˈliː.tʊs"
    assert build_game_dictionary(SOURCE)["TERRA"].pronunciation == ""


def test_later_spelling_wins_on_collision():
    entries = build_game_dictionary({"mōtum": {"meaning": "first"}, "motum": {"meaning": "second"}})
    assert entries["MOTUM"].meaning == "second"
    assert entries["MOTUM"].original == "motum"


def test_build_without_matches_fails():
    with pytest.raises(EmptyDictionaryError):
        build_game_dictionary({"aqua": {}, "puella": {}})


def test_written_dictionary_loads_back(tmp_path):
    path = str(tmp_path / "words.json")
    entries = build_game_dictionary(SOURCE)
    write_game_dictionary(entries, path)
    assert load_word_dictionary(path) == entries


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


def test_fetch_source_dictionary(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(SOURCE)

    monkeypatch.setattr(dictionary_builder.requests, "get", fake_get)

    assert fetch_source_dictionary("https://example.test/dictionary.json", timeout=3) == SOURCE
    assert calls == [("https://example.test/dictionary.json", 3)]


def test_fetch_propagates_http_errors(monkeypatch):
    monkeypatch.setattr(dictionary_builder.requests, "get", lambda url, timeout: FakeResponse({}, 404))
    with pytest.raises(requests.exceptions.HTTPError):
        fetch_source_dictionary("https://example.test/missing.json")


def test_fetch_rejects_non_object(monkeypatch):
    monkeypatch.setattr(dictionary_builder.requests, "get", lambda url, timeout: FakeResponse(["terra"]))
    with pytest.raises(ValueError):
        fetch_source_dictionary("https://example.test/list.json")


def test_main_writes_output(monkeypatch, tmp_path):
    monkeypatch.setattr(dictionary_builder.requests, "get", lambda url, timeout: FakeResponse(SOURCE))
    output = tmp_path / "words.json"

    assert dictionary_builder.main([str(output)]) == 0
    assert set(load_word_dictionary(str(output))) == {"MOTUM", "TERRA", "LITUS"}


def test_main_reports_failure(monkeypatch, tmp_path):
    monkeypatch.setattr(dictionary_builder.requests, "get", lambda url, timeout: FakeResponse({"aqua": {}}))
    output = tmp_path / "words.json"

    assert dictionary_builder.main([str(output)]) == 1
    assert not output.exists()


def test_main_reports_unwritable_output(monkeypatch, tmp_path):
    monkeypatch.setattr(dictionary_builder.requests, "get", lambda url, timeout: FakeResponse(SOURCE))
    output = tmp_path / "missing_dir" / "words.json"

    assert dictionary_builder.main([str(output)]) == 1
    assert not output.exists()

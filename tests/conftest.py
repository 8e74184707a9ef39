import pytest

from latin_wordle import create_app
from latin_wordle.config import TestingConfig
from latin_wordle.models import WordData
from latin_wordle.services.game_service import initialize_game_service


class ScriptedChoice:
    """Random source that hands out words in a fixed order and counts draws."""

    def __init__(self, *words):
        self.words = list(words)
        self.calls = 0

    def choice(self, seq):
        word = self.words[self.calls % len(self.words)]
        self.calls += 1
        assert word in seq
        return word


@pytest.fixture
def dictionary():
    return {
        "TERRA": WordData(original="terra", meaning="earth, land", part="Noun", pronunciation="ˈter.ra"),
        "LUPUS": WordData(original="lupus", meaning="wolf", part="Noun"),
        "MOTUM": WordData(original="mōtum", meaning="moved", part="Verb"),
        "LITUS": WordData(original="lītus", meaning="shore", part="Noun"),
    }


@pytest.fixture
def rng():
    return ScriptedChoice("TERRA", "LUPUS")


@pytest.fixture
def game_service(dictionary, rng):
    return initialize_game_service(dictionary, rng)


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()

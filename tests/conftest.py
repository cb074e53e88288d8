import pytest

from wordladder import Dictionary, GameConfig, GameSession


WORDS = ["star", "moon", "test", "bear", "tent", "boat",
         "soar", "boar", "boor", "boon", "stir", "stay", "sear"]


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n")
    return path


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def session(dictionary, config):
    return GameSession(dictionary, config)


@pytest.fixture
def events(session):
    received = []
    session.subscribe(received.append)
    return received

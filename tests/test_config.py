import logging

import pytest

from wordladder import ConfigurationError, GameConfig, load_config
from wordladder.config import CONFIG_ENV


def test_defaults():
    config = GameConfig()
    assert config.show_errors is True
    assert config.show_path is True
    assert config.use_random_words is False
    assert config.word_length == 4
    assert (config.default_start, config.default_target) == ("star", "moon")


def test_no_file_gives_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    assert load_config().to_dict() == GameConfig().to_dict()


def test_load_yaml(tmp_path):
    path = tmp_path / "wordladder.yaml"
    path.write_text("show_errors: false\nuse_random_words: true\nword_length: 5\n")

    config = load_config(str(path))

    assert config.show_errors is False
    assert config.show_path is True
    assert config.use_random_words is True
    assert config.word_length == 5


def test_load_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("show_path: false\n")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    assert load_config().show_path is False


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)).to_dict() == GameConfig().to_dict()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize("content", [
    "show_errors: [unclosed\n",
    "- just\n- a list\n",
    "show_path: maybe\n",
    "word_length: 0\n",
    "dictionary: 12\n",
])
def test_bad_content(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_unknown_key_is_ignored(tmp_path, caplog):
    path = tmp_path / "extra.yaml"
    path.write_text("colour: blue\nshow_path: false\n")

    with caplog.at_level(logging.WARNING, logger="wordladder.config"):
        config = load_config(str(path))

    assert config.show_path is False
    assert not hasattr(config, "colour")
    assert "colour" in caplog.text

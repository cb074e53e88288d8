"""
Game Configuration
==================

Three independent display/play flags plus the settings needed to build an
engine. Values come from defaults, optionally overridden by a YAML file:

    show_errors: true
    show_path: true
    use_random_words: false
    dictionary: /usr/share/dict/words
    word_length: 4
    default_start: star
    default_target: moon

The file is taken from the ``path`` argument, else from the
WORDLADDER_CONFIG environment variable, else defaults are used.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml

from .dictionary import DEFAULT_DICTIONARY, DEFAULT_WORD_LENGTH
from .errors import ConfigurationError


logger = logging.getLogger(__name__)

CONFIG_ENV = "WORDLADDER_CONFIG"
DEFAULT_START = "star"
DEFAULT_TARGET = "moon"

FLAGS = ("show_errors", "show_path", "use_random_words")


class GameConfig:
    """
    Flags read by the session and by front ends.

    show_path gates whether the session exposes the attempt path;
    show_errors and use_random_words are only consulted by callers
    (use_random_words also picks the pair in GameSession.new_game).
    """

    def __init__(self, show_errors: bool = True, show_path: bool = True,
                 use_random_words: bool = False,
                 dictionary: str = DEFAULT_DICTIONARY,
                 word_length: int = DEFAULT_WORD_LENGTH,
                 default_start: str = DEFAULT_START,
                 default_target: str = DEFAULT_TARGET):
        self.show_errors = show_errors
        self.show_path = show_path
        self.use_random_words = use_random_words
        self.dictionary = dictionary
        self.word_length = word_length
        self.default_start = default_start
        self.default_target = default_target

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "GameConfig":
        config = cls()
        known = config.to_dict()
        for key, value in values.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key %r", key)
                continue
            if key in FLAGS and not isinstance(value, bool):
                raise ConfigurationError(f"{key} must be true or false, got {value!r}")
            if key == "word_length" and (not isinstance(value, int)
                                         or isinstance(value, bool) or value < 1):
                raise ConfigurationError(f"word_length must be a positive integer, got {value!r}")
            if key in ("dictionary", "default_start", "default_target") \
                    and not isinstance(value, str):
                raise ConfigurationError(f"{key} must be a string, got {value!r}")
            setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "show_errors": self.show_errors,
            "show_path": self.show_path,
            "use_random_words": self.use_random_words,
            "dictionary": self.dictionary,
            "word_length": self.word_length,
            "default_start": self.default_start,
            "default_target": self.default_target,
        }

    def __repr__(self):
        return f"GameConfig({self.to_dict()})"


def load_config(path: Optional[str] = None) -> GameConfig:
    """
    Build a GameConfig from a YAML file.

    Raises:
        ConfigurationError: the file cannot be read, is not valid YAML, is
            not a mapping, or holds a value of the wrong type
    """
    if path is None:
        path = os.getenv(CONFIG_ENV)
    if not path:
        return GameConfig()

    try:
        with open(path, "r") as f:
            values = yaml.safe_load(f)
    except (OSError, IOError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed config file {path}: {e}") from e

    if values is None:
        values = {}
    if not isinstance(values, dict):
        raise ConfigurationError(f"Config file {path} must hold a mapping")

    config = GameConfig.from_dict(values)
    logger.info("Loaded configuration from %s", path)
    return config

"""
Word Dictionary
===============

Fixed-length word list shared read-only by game sessions and the solver.

Loading rules:
- each line is trimmed and lowercased
- only entries of exactly ``word_length`` characters are kept
- duplicates are dropped, first occurrence keeps its position

The enumeration order is stable (file order) so random pair selection is
reproducible with a seeded generator.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .errors import ConfigurationError, StateError


logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 4
DEFAULT_DICTIONARY = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", "words4.txt"
)

_rng = np.random.default_rng()


def words_to_chars(words: List[str], word_length: int) -> np.ndarray:
    """Convert words to a (n, word_length) array of character codes."""
    arr = np.zeros((len(words), word_length), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c)
    return arr


def normalize(lines: Iterable[str], word_length: int) -> List[str]:
    """Trim, lowercase, keep only ``word_length`` entries, deduplicate."""
    seen = set()
    words = []
    for line in lines:
        word = line.strip().lower()
        if len(word) != word_length or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


class Dictionary:
    """
    Immutable set of lowercase words of one fixed length.

    Args:
        words: Raw entries; normalised with the loading rules above
        word_length: Length every member must have
    """

    def __init__(self, words: Iterable[str], word_length: int = DEFAULT_WORD_LENGTH):
        if word_length < 1:
            raise ConfigurationError(f"Word length must be positive, got {word_length}")

        self.word_length = word_length
        self._words = tuple(normalize(words, word_length))
        if not self._words:
            raise ConfigurationError(
                f"Dictionary has no {word_length}-letter words"
            )

        self._word_to_idx = {w: i for i, w in enumerate(self._words)}
        self._chars = words_to_chars(list(self._words), word_length)

    @classmethod
    def load(cls, path: str = DEFAULT_DICTIONARY,
             word_length: int = DEFAULT_WORD_LENGTH) -> "Dictionary":
        """
        Load a newline-separated word list.

        Raises:
            ConfigurationError: file missing or unreadable, or no word of
                the requested length survived filtering
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read dictionary {path}: {e}") from e

        dictionary = cls(lines, word_length)
        logger.info("Loaded %d %d-letter words from %s",
                    len(dictionary), word_length, path)
        return dictionary

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def chars(self) -> np.ndarray:
        """(n, word_length) int32 matrix of character codes."""
        return self._chars

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return self.is_valid(word)

    def __repr__(self):
        return f"Dictionary({len(self)} words, length={self.word_length})"

    def is_valid(self, word) -> bool:
        """True iff ``word`` (any case) has the right length and is a member."""
        if not isinstance(word, str) or len(word) != self.word_length:
            return False
        return word.lower() in self._word_to_idx

    def index(self, word: str) -> int:
        """Position of ``word`` in the enumeration order, -1 if absent."""
        if not isinstance(word, str):
            return -1
        return self._word_to_idx.get(word.lower(), -1)

    def random_distinct_pair(self, rng: Optional[np.random.Generator] = None) -> Tuple[str, str]:
        """
        Pick two different members, uniform over ordered distinct pairs.

        The second index is drawn from n - 1 values and shifted past the
        first, so no draw is ever rejected.

        Args:
            rng: numpy Generator; the module generator is used when omitted

        Raises:
            StateError: fewer than two words
        """
        n = len(self._words)
        if n < 2:
            raise StateError(f"Need at least 2 words for a pair, dictionary has {n}")

        rng = rng if rng is not None else _rng
        first = int(rng.integers(0, n))
        second = int(rng.integers(0, n - 1))
        if second >= first:
            second += 1
        return self._words[first], self._words[second]

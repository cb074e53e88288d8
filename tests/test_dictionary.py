from collections import Counter

import numpy as np
import pytest

from wordladder import ConfigurationError, Dictionary, StateError


def test_load_normalizes_entries(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("  Star \nMOON\nstar\nab\nlonger\n\ntest\n")

    dictionary = Dictionary.load(str(path))

    assert dictionary.words == ("star", "moon", "test")
    assert len(dictionary) == 3


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigurationError) as exc:
        Dictionary.load(str(tmp_path / "nope.txt"))
    assert exc.value.kind == "configuration"


def test_load_nothing_of_right_length(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("a\nab\nabcde\n")
    with pytest.raises(ConfigurationError):
        Dictionary.load(str(path))


def test_other_word_length(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncot\nstar\n")
    dictionary = Dictionary.load(str(path), word_length=3)
    assert dictionary.words == ("cat", "cot")
    assert dictionary.chars.shape == (2, 3)


def test_is_valid_ignores_case(dictionary):
    assert dictionary.is_valid("star")
    assert dictionary.is_valid("STAR")
    assert "MoOn" in dictionary
    assert not dictionary.is_valid("abcd")
    assert not dictionary.is_valid("sta")
    assert not dictionary.is_valid(None)


def test_index_follows_enumeration_order(dictionary):
    assert dictionary.index("star") == 0
    assert dictionary.index("MOON") == 1
    assert dictionary.index("zzzz") == -1
    assert list(dictionary) == list(dictionary.words)


def test_chars_matrix(dictionary):
    assert dictionary.chars.shape == (len(dictionary), 4)
    assert "".join(chr(c) for c in dictionary.chars[0]) == "star"


def test_random_pair_is_distinct_members(dictionary):
    rng = np.random.default_rng(7)
    for _ in range(200):
        first, second = dictionary.random_distinct_pair(rng)
        assert first != second
        assert first in dictionary and second in dictionary


def test_random_pair_two_words():
    dictionary = Dictionary(["star", "moon"])
    rng = np.random.default_rng(1)
    pairs = {dictionary.random_distinct_pair(rng) for _ in range(100)}
    assert pairs == {("star", "moon"), ("moon", "star")}


def test_random_pair_uniform_over_ordered_pairs():
    dictionary = Dictionary(["aaaa", "bbbb", "cccc"])
    rng = np.random.default_rng(42)
    counts = Counter(dictionary.random_distinct_pair(rng) for _ in range(6000))

    assert len(counts) == 6
    for count in counts.values():
        assert 800 < count < 1200


def test_random_pair_needs_two_words():
    dictionary = Dictionary(["star"])
    for _ in range(3):
        with pytest.raises(StateError):
            dictionary.random_distinct_pair()

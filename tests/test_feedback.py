import pytest

from wordladder import CharacterStatus, ValidationError, feedback_to_string, score

C = CharacterStatus.CORRECT_POSITION
P = CharacterStatus.PRESENT_IN_WORD
N = CharacterStatus.NOT_PRESENT


def test_target_against_itself():
    assert score("tent", "tent") == [C, C, C, C]


def test_case_insensitive():
    assert score("Tent", "tent") == score("tent", "tent")
    assert score("TEST", "Tent") == score("test", "tent")


def test_mixed_statuses():
    assert score("abcl", "ball") == [P, P, N, C]
    assert score("stop", "pots") == [P, P, P, P]
    assert score("xyzw", "ball") == [N, N, N, N]


@pytest.mark.parametrize("guess, expected", [
    ("llll", [N, N, C, C]),
    ("llxx", [P, P, N, N]),
    ("lllx", [P, N, C, N]),
    ("lxxl", [P, N, N, C]),
])
def test_repeated_letter_never_overcounted(guess, expected):
    statuses = score(guess, "ball")
    assert statuses == expected

    matched = sum(1 for c, s in zip(guess, statuses) if c == "l" and s != N)
    assert matched <= "ball".count("l")


def test_exact_match_takes_priority():
    # the only 'a' goes to the exact match, the earlier 'a' gets nothing
    assert score("aabb", "cacc") == [N, C, N, N]
    assert score("eeks", "seek") == [P, C, P, P]


def test_length_mismatch():
    with pytest.raises(ValidationError):
        score("tent", "tents")


def test_other_lengths():
    assert score("crane", "nacre") == [P, P, P, P, C]


def test_feedback_to_string():
    assert feedback_to_string(score("abcl", "ball")) == "YY-G"

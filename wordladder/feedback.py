"""
Letter Feedback
===============

Per-position status of a guess against a target word, Wordle style:

- CORRECT_POSITION: same letter at the same position
- PRESENT_IN_WORD: letter occurs elsewhere in the target
- NOT_PRESENT: letter is absent, or all its occurrences are already used

Duplicate letters are handled as a multiset: every target slot can be
matched at most once, exact matches first, then leftmost free slot.
"""

from enum import IntEnum
from typing import List

import numpy as np
from numba import jit

from .dictionary import words_to_chars
from .errors import ValidationError


# ============================================================================
# CONSTANTS
# ============================================================================

class CharacterStatus(IntEnum):
    NOT_PRESENT = 0
    PRESENT_IN_WORD = 1
    CORRECT_POSITION = 2


STATUS_CHARS = {
    CharacterStatus.CORRECT_POSITION: "G",
    CharacterStatus.PRESENT_IN_WORD: "Y",
    CharacterStatus.NOT_PRESENT: "-",
}

USED = -1  # target slot already matched


# ============================================================================
# NUMBA FEEDBACK KERNEL
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> np.ndarray:
    """
    Compute feedback for a guess against an answer.

    Args:
        guess: shape (L,) array of char codes
        answer: shape (L,) array of char codes

    Returns:
        shape (L,) array of status codes (0 absent, 1 present, 2 correct)
    """
    n = guess.shape[0]
    feedback = np.zeros(n, dtype=np.int32)
    remaining = answer.copy()

    # First pass: exact matches consume their slot
    for i in range(n):
        if guess[i] == answer[i]:
            feedback[i] = 2
            remaining[i] = USED

    # Second pass: leftmost unused slot with the same letter
    for i in range(n):
        if feedback[i] == 0:
            c = guess[i]
            for j in range(n):
                if remaining[j] == c:
                    feedback[i] = 1
                    remaining[j] = USED
                    break

    return feedback


# ============================================================================
# PUBLIC API
# ============================================================================

def score(guess: str, target: str) -> List[CharacterStatus]:
    """
    Score ``guess`` against ``target``, ignoring case.

    Raises:
        ValidationError: either word is not a string, or lengths differ
    """
    if not isinstance(guess, str) or not isinstance(target, str):
        raise ValidationError("Feedback needs two words")
    if len(guess) != len(target):
        raise ValidationError(
            f"Cannot score '{guess}' against '{target}': lengths differ"
        )

    length = len(target)
    chars = words_to_chars([guess.lower(), target.lower()], length)
    codes = compute_feedback(chars[0], chars[1])
    return [CharacterStatus(int(c)) for c in codes]


def feedback_to_string(statuses: List[CharacterStatus]) -> str:
    """Render statuses as G/Y/-, e.g. 'G-YG'."""
    return "".join(STATUS_CHARS[s] for s in statuses)

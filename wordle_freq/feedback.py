"""
Feedback Simulation
===================

Replicates, independently of any game engine, the per-letter feedback a
guess would receive against a hypothetical answer.

Duplicate letters are resolved in two passes: exact matches first, each
consuming one count of its letter, then misplaced letters in index order
from whatever counts are left. Guess "geese" against "those" is therefore
``---GG`` and not ``-Y-GG``: the final 'e' is green and uses up the only
'e' before the earlier ones are considered.
"""

from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from numba import jit

from .config import CONFIG


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = CONFIG["word_length"]
ALPHABET_SIZE = 26

UNUSED = 0
MISPLACED = 1
CORRECT = 2
CORRECT_PATTERN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242 (all green)


class LetterStatus(IntEnum):
    """Verdict for one guessed letter. Values match the kernel codes."""

    UNUSED = UNUSED
    MISPLACED = MISPLACED
    CORRECT = CORRECT


_SYMBOLS = {UNUSED: "-", MISPLACED: "Y", CORRECT: "G"}


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> np.ndarray:
    """
    Compute Wordle feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        shape (5,) int8 array of status codes (0 unused, 1 misplaced, 2 correct)
    """
    feedback = np.zeros(WORD_LENGTH, dtype=np.int8)
    answer_counts = np.zeros(ALPHABET_SIZE, dtype=np.int32)

    # Count letters in answer
    for i in range(WORD_LENGTH):
        answer_counts[answer[i]] += 1

    # First pass: mark greens
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            feedback[i] = CORRECT
            answer_counts[guess[i]] -= 1

    # Second pass: mark yellows
    for i in range(WORD_LENGTH):
        if feedback[i] != CORRECT:
            c = guess[i]
            if answer_counts[c] > 0:
                feedback[i] = MISPLACED
                answer_counts[c] -= 1

    return feedback


# ============================================================================
# WORD HELPERS
# ============================================================================

def encode_word(word: str) -> np.ndarray:
    """Convert a five-letter lowercase word to its char code array."""
    if not is_word(word):
        raise ValueError(f"Not a {WORD_LENGTH}-letter lowercase word: {word!r}")
    return np.array([ord(c) - ord('a') for c in word], dtype=np.int32)


def is_word(word: str) -> bool:
    return len(word) == WORD_LENGTH and all('a' <= c <= 'z' for c in word)


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to an (n, 5) char code array."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        arr[i] = encode_word(w)
    return arr


def statuses_to_codes(statuses: Iterable[int]) -> np.ndarray:
    codes = np.array([int(s) for s in statuses], dtype=np.int8)
    if codes.shape != (WORD_LENGTH,):
        raise ValueError(f"Feedback must have {WORD_LENGTH} entries, got {codes.shape[0]}")
    return codes


def simulate(guess: str, answer: str) -> Tuple[LetterStatus, ...]:
    """Feedback that `guess` would receive if `answer` were the secret word."""
    codes = compute_feedback(encode_word(guess), encode_word(answer))
    return tuple(LetterStatus(int(c)) for c in codes)


def pattern_code(statuses: Iterable[int]) -> int:
    """Base-3 pattern number (0-242) of a status row."""
    code = 0
    for i, s in enumerate(statuses):
        code += int(s) * 3 ** i
    return code


def feedback_to_string(statuses: Iterable[int]) -> str:
    """Render feedback as G (correct), Y (misplaced) and - (unused)."""
    return "".join(_SYMBOLS[int(s)] for s in statuses)


def parse_feedback(text: str) -> List[LetterStatus]:
    """Inverse of feedback_to_string. Accepts G/Y/- (case-insensitive, '.' or 'B' for unused)."""
    lookup = {"g": LetterStatus.CORRECT, "y": LetterStatus.MISPLACED,
              "-": LetterStatus.UNUSED, ".": LetterStatus.UNUSED, "b": LetterStatus.UNUSED}
    try:
        statuses = [lookup[c] for c in text.strip().lower()]
    except KeyError as e:
        raise ValueError(f"Unknown feedback symbol {e.args[0]!r} in {text!r}") from None
    if len(statuses) != WORD_LENGTH:
        raise ValueError(f"Feedback must have {WORD_LENGTH} entries: {text!r}")
    return statuses

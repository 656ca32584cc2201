"""
Candidate Filtering
===================

Prunes the remaining candidates against one observed feedback result.

A candidate survives only if simulating the observed guess against it
reproduces the observed feedback exactly. The true answer can never be
dropped, since its simulated feedback is by definition what the judge
reported.
"""

from typing import List, Sequence

import numpy as np
from numba import jit

from .feedback import WORD_LENGTH, compute_feedback, encode_word, statuses_to_codes, words_to_chars
from .words import Dictionary


@jit(nopython=True, cache=True)
def match_mask(guess: np.ndarray, candidates: np.ndarray, target: np.ndarray) -> np.ndarray:
    """
    Mark candidates whose simulated feedback equals the observed one.

    Args:
        guess: shape (5,) char codes of the guessed word
        candidates: shape (n, 5) char codes
        target: shape (5,) observed status codes

    Returns:
        shape (n,) boolean mask
    """
    n = candidates.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    for j in range(n):
        fb = compute_feedback(guess, candidates[j])
        ok = True
        for i in range(WORD_LENGTH):
            if fb[i] != target[i]:
                ok = False
                break
        mask[j] = ok
    return mask


def _keep_mask(guess_chars: np.ndarray, candidate_chars: np.ndarray,
               actual_feedback, was_correct: bool) -> np.ndarray:
    target = statuses_to_codes(actual_feedback)
    mask = match_mask(guess_chars, candidate_chars, target)
    if not was_correct:
        # A wrong guess can never be the secret word
        mask &= ~np.all(candidate_chars == guess_chars, axis=1)
    return mask


def filter_candidates(remaining: Sequence[str], guessed: str, actual_feedback,
                      was_correct: bool) -> List[str]:
    """Return the candidates still consistent with the feedback, order preserved."""
    mask = _keep_mask(encode_word(guessed), words_to_chars(remaining), actual_feedback, was_correct)
    return [w for w, keep in zip(remaining, mask) if keep]


def narrow(dictionary: Dictionary, indices: np.ndarray, guessed: str, actual_feedback,
           was_correct: bool) -> np.ndarray:
    """Index-level filter over a Dictionary, used by the solver."""
    mask = _keep_mask(encode_word(guessed), dictionary.chars[indices], actual_feedback, was_correct)
    return indices[mask]

"""
Guess Scoring
=============

Letter-coverage heuristic (not an entropy solver):

- Count every letter occurrence across the remaining candidates.
- Score each word of the full dictionary by summing those counts over its
  distinct letters, so probe words that are no longer possible answers
  can still be chosen when they cover the common letters best.
- Highest score wins. On a tie, a word that is still a possible answer
  beats one that is not; any further tie goes to dictionary order.
"""

from typing import Dict, Sequence

import numpy as np

from .feedback import ALPHABET_SIZE, words_to_chars
from .words import letter_sets


def letter_counts(candidate_chars: np.ndarray) -> np.ndarray:
    """Occurrences of each letter (repeats included) across the candidates."""
    return np.bincount(candidate_chars.ravel(), minlength=ALPHABET_SIZE).astype(np.int64)


def letter_frequencies(candidates: Sequence[str]) -> Dict[str, int]:
    """Frequency table as a {letter: count} mapping, letters that occur only."""
    counts = letter_counts(words_to_chars(candidates))
    return {chr(ord('a') + i): int(c) for i, c in enumerate(counts) if c > 0}


def score_words(word_letter_sets: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Sum of counts over each word's distinct letters."""
    return word_letter_sets @ counts


def best_guess_index(word_letter_sets: np.ndarray, candidate_chars: np.ndarray,
                     is_candidate: np.ndarray) -> int:
    """
    Index of the best guess among all words.

    Equivalent to a single pass keeping the running best, replacing it on
    a strictly higher score, or on an equal score when the new word is a
    candidate and the current best is not.

    Args:
        word_letter_sets: shape (n_words, 26) distinct-letter incidence
        candidate_chars: shape (n_candidates, 5) char codes of remaining words
        is_candidate: shape (n_words,) boolean, word is a remaining candidate

    Returns:
        Index into the word list, or -1 if the word list is empty
    """
    if word_letter_sets.shape[0] == 0:
        return -1

    scores = score_words(word_letter_sets, letter_counts(candidate_chars))
    top = np.flatnonzero(scores == scores.max())
    preferred = top[is_candidate[top]]
    if preferred.size:
        return int(preferred[0])
    return int(top[0])


def choose_guess(remaining: Sequence[str], dictionary: Sequence[str]) -> str:
    """Pick the next guess from `dictionary` given the `remaining` candidates."""
    if len(remaining) == 1:
        return remaining[0]

    words = list(dictionary)
    if not words:
        if not remaining:
            raise ValueError("No words to choose from")
        return remaining[0]

    remaining_set = set(remaining)
    is_candidate = np.array([w in remaining_set for w in words], dtype=np.bool_)
    idx = best_guess_index(letter_sets(words_to_chars(words)), words_to_chars(remaining), is_candidate)
    return words[idx]

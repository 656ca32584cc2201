"""Word-list loading and the shared, read-only Dictionary table."""

import logging
from typing import Dict, Iterator, List, Sequence

import numpy as np

from .errors import ResourceMissingError
from .feedback import ALPHABET_SIZE, WORD_LENGTH, is_word, words_to_chars

log = logging.getLogger(__name__)


def load_words(filepath: str) -> List[str]:
    """
    Load word list from file.

    Lines are trimmed and lowercased; only distinct five-letter entries are
    kept, in the order first seen.
    """
    try:
        with open(filepath, 'r') as f:
            lines = f.readlines()
    except OSError as e:
        raise ResourceMissingError(f"Word list not found at path: {filepath} ({e})") from e

    words = []
    seen = set()
    skipped = 0
    for line in lines:
        w = line.strip().lower()
        if len(w) != WORD_LENGTH or w in seen:
            continue
        if not is_word(w):
            skipped += 1
            continue
        seen.add(w)
        words.append(w)

    if skipped:
        log.warning(f"Skipped {skipped} non-alphabetic entries in {filepath}")
    log.info(f"Loaded {len(words)} words from {filepath}")
    return words


def letter_sets(chars: np.ndarray) -> np.ndarray:
    """(n, 26) 0/1 matrix: which letters appear (at least once) in each word."""
    n = chars.shape[0]
    sets = np.zeros((n, ALPHABET_SIZE), dtype=np.int64)
    rows = np.repeat(np.arange(n), WORD_LENGTH)
    sets[rows, chars.ravel()] = 1
    return sets


class Dictionary:
    """
    Immutable table of valid words, built once and shared by every solver.

    Word order is load order; the scorer's tie-breaking depends on it.
    Precomputed arrays are flagged read-only so no solver can mutate them.
    """

    def __init__(self, words: Sequence[str]):
        self.words = tuple(words)
        self.word_to_idx: Dict[str, int] = {w: i for i, w in enumerate(self.words)}
        if len(self.word_to_idx) != len(self.words):
            raise ValueError("Dictionary words must be unique")

        self.chars = words_to_chars(self.words)
        self.letter_sets = letter_sets(self.chars)
        self.chars.flags.writeable = False
        self.letter_sets.flags.writeable = False

    @classmethod
    def from_file(cls, filepath: str) -> "Dictionary":
        return cls(load_words(filepath))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word) -> bool:
        return word in self.word_to_idx

    def __getitem__(self, idx: int) -> str:
        return self.words[idx]

    def __repr__(self) -> str:
        return f"Dictionary({len(self.words)} words)"

    def index(self, word: str) -> int:
        return self.word_to_idx[word]


def load_dictionary(filepath: str) -> Dictionary:
    return Dictionary.from_file(filepath)

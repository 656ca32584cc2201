"""
Frequency-Coverage Wordle Solver
================================

Strategy exposed to a game driver through two calls:

- reset(): start a new game, every dictionary word is a candidate again
- pick_next_guess(previous_result): filter on the previous feedback,
  then pick the word whose distinct letters best cover the remaining
  candidates

The first guess of each game is a fixed opener (CRANE by default).
"""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from . import candidates, scorer
from .config import CONFIG
from .errors import InternalInconsistencyError, SolverError
from .feedback import LetterStatus, WORD_LENGTH, feedback_to_string
from .words import Dictionary

log = logging.getLogger(__name__)


# ============================================================================
# GAME DATA
# ============================================================================

class GuessResult(NamedTuple):
    """One round's outcome as reported by the judge."""

    word: str
    statuses: Tuple[LetterStatus, ...]
    guess_number: int
    is_valid: bool
    is_correct: bool

    @classmethod
    def default(cls) -> "GuessResult":
        """Result passed before the first guess of a game."""
        return cls("", (LetterStatus.UNUSED,) * WORD_LENGTH, 0, False, False)


class Pick(NamedTuple):
    """Either a word or the error that prevented choosing one."""

    word: Optional[str]
    error: Optional[SolverError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SolverState(Enum):
    FRESH = "fresh"
    IN_PROGRESS = "in_progress"


# ============================================================================
# SOLVER CLASS
# ============================================================================

class FrequencySolver:
    """
    Letter-frequency Wordle solver.

    The dictionary is shared and never modified; the remaining candidates
    belong to this instance, so concurrent games need one solver each.
    """

    def __init__(self, dictionary: Dictionary, first_guess: str = None):
        """
        Initialize solver with a word list.

        Args:
            dictionary: Valid words, in the order used for tie-breaking
            first_guess: Opening guess (defaults to CONFIG["first_guess"])
        """
        self.dictionary = dictionary
        self.first_guess = (first_guess or CONFIG["first_guess"]).lower()
        self._remaining = np.arange(len(dictionary))
        self.state = SolverState.FRESH

        self._setup_first_guess()

    def _setup_first_guess(self):
        """Fall back to the best full-dictionary guess if the opener is unknown."""
        if self.first_guess in self.dictionary or len(self.dictionary) == 0:
            return
        log.warning(f"'{self.first_guess}' not in word list, computing best opener...")
        self.first_guess = self._best_guess()
        log.info(f"Best first guess: {self.first_guess}")

    @property
    def remaining(self) -> List[str]:
        """Words still consistent with all feedback this game."""
        return [self.dictionary[i] for i in self._remaining]

    def reset(self):
        self._remaining = np.arange(len(self.dictionary))
        self.state = SolverState.FRESH

    def pick_next_guess(self, previous_result: GuessResult) -> str:
        """
        Choose the next guess.

        Args:
            previous_result: Judge's result for the last guess, or
                GuessResult.default() before the first one

        Returns:
            A five-letter word from the dictionary

        Raises:
            InternalInconsistencyError: the judge rejected a previous guess,
                or no candidate survives the feedback
        """
        if previous_result.guess_number == 0:
            self.state = SolverState.IN_PROGRESS
            return self.first_guess

        if not previous_result.is_valid:
            raise InternalInconsistencyError(
                f"Solver attempted an invalid guess '{previous_result.word}'. "
                "The solver's dictionary and the judge's dictionary disagree."
            )

        self._apply_feedback(previous_result)
        self.state = SolverState.IN_PROGRESS

        n_candidates = len(self._remaining)
        if n_candidates == 1:
            return self.dictionary[self._remaining[0]]

        if n_candidates == 0:
            raise InternalInconsistencyError(
                "No remaining words to choose from. "
                f"Feedback for '{previous_result.word}' eliminated every candidate."
            )

        guess = self._best_guess()
        log.debug(f"Guess {previous_result.guess_number + 1}: {guess} ({n_candidates} candidates)")
        return guess

    def try_pick_next_guess(self, previous_result: GuessResult) -> Pick:
        """Like pick_next_guess, but returns solver errors instead of raising."""
        try:
            return Pick(self.pick_next_guess(previous_result))
        except SolverError as e:
            log.error(f"{e.kind.value}: {e}")
            return Pick(None, e)

    def _apply_feedback(self, previous_result: GuessResult):
        before = len(self._remaining)
        self._remaining = candidates.narrow(
            self.dictionary, self._remaining, previous_result.word,
            previous_result.statuses, previous_result.is_correct,
        )
        log.debug(f"{previous_result.word} {feedback_to_string(previous_result.statuses)}: "
                  f"{before} -> {len(self._remaining)} candidates")

    def _best_guess(self) -> str:
        if len(self._remaining) == 1:
            return self.dictionary[self._remaining[0]]

        is_candidate = np.zeros(len(self.dictionary), dtype=np.bool_)
        is_candidate[self._remaining] = True
        idx = scorer.best_guess_index(
            self.dictionary.letter_sets, self.dictionary.chars[self._remaining], is_candidate
        )
        if idx < 0:
            return self.dictionary[self._remaining[0]]
        return self.dictionary[idx]

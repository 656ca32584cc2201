"""
Wordle Solver - Letter-Frequency Coverage
=========================================

Narrows the candidate list by simulating feedback and picks the word whose
distinct letters cover the remaining candidates best, preferring words
that could still be the answer.
"""

__version__ = "1.0.0"

from .errors import ErrorKind, InternalInconsistencyError, ResourceMissingError, SolverError
from .feedback import LetterStatus, simulate
from .candidates import filter_candidates
from .scorer import choose_guess, letter_frequencies
from .words import Dictionary, load_dictionary, load_words
from .solver import FrequencySolver, GuessResult, Pick, SolverState
from .harness import Judge, benchmark, play, print_results

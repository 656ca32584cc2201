"""
Game harness: a reference judge, a play loop and a benchmark for any
strategy exposing reset() / pick_next_guess().
"""

import argparse
import logging
import random
import time
from collections import Counter
from typing import Dict, List, Protocol, Tuple

from .config import CONFIG
from .errors import ResourceMissingError, SolverError
from .feedback import CORRECT_PATTERN, LetterStatus, WORD_LENGTH, feedback_to_string, pattern_code, simulate
from .solver import FrequencySolver, GuessResult
from .words import Dictionary, load_dictionary

log = logging.getLogger(__name__)


class SolverStrategy(Protocol):
    def reset(self) -> None: ...

    def pick_next_guess(self, previous_result: GuessResult) -> str: ...


# ============================================================================
# REFERENCE JUDGE
# ============================================================================

class Judge:
    """Plays the game side: holds the answer and grades guesses."""

    def __init__(self, answer: str, dictionary: Dictionary, max_guesses: int = None):
        self.answer = answer.lower()
        if self.answer not in dictionary:
            raise ValueError(f"Answer '{answer}' not in word list")
        self.dictionary = dictionary
        self.max_guesses = max_guesses or CONFIG["max_guesses"]
        self.guess_number = 0
        self.solved = False

    @property
    def finished(self) -> bool:
        return self.solved or self.guess_number >= self.max_guesses

    def guess(self, word: str) -> GuessResult:
        self.guess_number += 1
        if word not in self.dictionary:
            return GuessResult(word, (LetterStatus.UNUSED,) * WORD_LENGTH,
                               self.guess_number, False, False)

        statuses = simulate(word, self.answer)
        self.solved = pattern_code(statuses) == CORRECT_PATTERN
        return GuessResult(word, statuses, self.guess_number, True, self.solved)


# ============================================================================
# PLAY / BENCHMARK
# ============================================================================

def play(solver: SolverStrategy, answer: str, dictionary: Dictionary,
         max_guesses: int = None, verbose: bool = False) -> Tuple[int, List[str]]:
    """
    Play one game.

    Returns:
        (num_guesses, list_of_guesses); num_guesses is max_guesses + 1 on failure
    """
    judge = Judge(answer, dictionary, max_guesses)
    solver.reset()

    result = GuessResult.default()
    guesses = []
    while not judge.finished:
        guess = solver.pick_next_guess(result)
        guesses.append(guess)
        result = judge.guess(guess)
        if verbose:
            log.info(f"Turn {result.guess_number}: {guess} {feedback_to_string(result.statuses)}")
        if result.is_correct:
            return len(guesses), guesses

    return judge.max_guesses + 1, guesses


def benchmark(solver: SolverStrategy, dictionary: Dictionary, test_words: List[str] = None,
              max_guesses: int = None, verbose: bool = True) -> Dict:
    """
    Benchmark solver on word list.

    Args:
        solver: strategy to test
        dictionary: shared word list, also the judge's valid guesses
        test_words: answers to play (default: whole dictionary)
        max_guesses: guesses allowed per game
        verbose: log progress

    Returns:
        Dict with results
    """
    if test_words is None:
        test_words = list(dictionary)
    max_guesses = max_guesses or CONFIG["max_guesses"]
    progress_every = CONFIG["progress_every"]

    results = []
    dist = Counter()
    failures = []

    start = time.time()
    for i, word in enumerate(test_words):
        if verbose and i % progress_every == 0:
            elapsed = time.time() - start
            rate = (i + 1) / elapsed if elapsed > 0 else 0
            avg = sum(results) / len(results) if results else 0
            log.info(f"[{i}/{len(test_words)}] {rate:.1f} w/s, avg={avg:.4f}")

        try:
            n, _ = play(solver, word, dictionary, max_guesses)
        except SolverError as e:
            log.error(f"{word}: {e}")
            n = max_guesses + 1
        results.append(n)
        dist[n] += 1
        if n > max_guesses:
            failures.append(word)

    elapsed = time.time() - start

    return {
        'total': len(test_words),
        'average': sum(results) / len(results) if results else 0.0,
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_words': failures[:20],
        'time': elapsed,
        'rate': len(test_words) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict):
    """Pretty print benchmark results."""
    total = results['total'] or 1
    print("\n" + "=" * 50)
    print("BENCHMARK RESULTS")
    print("=" * 50)
    print(f"Words tested: {results['total']}")
    print(f"Average guesses: {results['average']:.4f}")
    print(f"Failures: {results['failures']} ({100*results['failures']/total:.2f}%)")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / total
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['failed_words']:
        print(f"\nFailed words: {results['failed_words']}")
    print("=" * 50)


# ============================================================================
# MAIN
# ============================================================================

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark the letter-frequency Wordle solver",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--words", default=CONFIG["word_list"],
                        help="Word list, one word per line")
    parser.add_argument("--first-guess", default=CONFIG["first_guess"],
                        help="Opening guess")
    parser.add_argument("--sample", type=int, default=CONFIG["benchmark_sample"],
                        help="Number of answers to play (0 for all)")
    parser.add_argument("--seed", type=int, default=CONFIG["random_seed"],
                        help="Random seed for the sample")
    parser.add_argument("--max-guesses", type=int, default=CONFIG["max_guesses"],
                        help="Guesses allowed per game")
    parser.add_argument("--word", help="Play a single answer and show each turn")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        dictionary = load_dictionary(args.words)
    except ResourceMissingError as e:
        log.critical(str(e))
        return 1

    solver = FrequencySolver(dictionary, first_guess=args.first_guess)

    if args.word:
        n, gs = play(solver, args.word, dictionary, args.max_guesses, verbose=True)
        if n > args.max_guesses:
            log.info(f"  -> Failed after {len(gs)} guesses: {gs}")
        else:
            log.info(f"  -> Solved in {n} guesses: {gs}")
        return 0

    words = list(dictionary)
    if 0 < args.sample < len(words):
        random.seed(args.seed)
        words = random.sample(words, args.sample)
    results = benchmark(solver, dictionary, words, args.max_guesses)
    print_results(results)
    return 0

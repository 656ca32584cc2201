import pytest

from wordle_freq.errors import InternalInconsistencyError
from wordle_freq.feedback import LetterStatus
from wordle_freq.harness import Judge, benchmark, main, play, print_results
from wordle_freq.solver import FrequencySolver


class InvalidGuesser:
    """Always guesses a word the judge does not accept."""

    def reset(self):
        pass

    def pick_next_guess(self, previous_result):
        if previous_result.guess_number > 0 and not previous_result.is_valid:
            raise InternalInconsistencyError(f"'{previous_result.word}' rejected")
        return "zzzzz"


def test_judge_grades_guesses(small_dictionary):
    judge = Judge("plate", small_dictionary)
    first = judge.guess("crane")
    assert first.guess_number == 1
    assert first.is_valid and not first.is_correct
    assert first.statuses[2] is LetterStatus.CORRECT

    second = judge.guess("plate")
    assert second.guess_number == 2
    assert second.is_correct
    assert judge.finished


def test_judge_rejects_unknown_words(small_dictionary):
    judge = Judge("plate", small_dictionary)
    rejected = judge.guess("adieu")
    assert not rejected.is_valid
    assert rejected.guess_number == 1

    with pytest.raises(ValueError):
        Judge("adieu", small_dictionary)


@pytest.mark.parametrize("answer,expected", [
    ("crane", ["crane"]),
    ("slate", ["crane", "slate"]),
    ("stale", ["crane", "slate", "stale"]),
    ("plate", ["crane", "slate", "plate"]),
])
def test_play(small_dictionary, answer, expected):
    solver = FrequencySolver(small_dictionary)
    assert play(solver, answer, small_dictionary) == (len(expected), expected)


def test_benchmark(small_dictionary):
    solver = FrequencySolver(small_dictionary)
    results = benchmark(solver, small_dictionary, verbose=False)
    assert results["total"] == 4
    assert results["average"] == pytest.approx(2.25)
    assert results["distribution"] == {1: 1, 2: 1, 3: 2}
    assert results["failures"] == 0


def test_benchmark_counts_solver_errors_as_failures(small_dictionary):
    results = benchmark(InvalidGuesser(), small_dictionary, verbose=False)
    assert results["failures"] == 4
    assert results["distribution"] == {7: 4}
    assert results["failed_words"] == list(small_dictionary)


def test_print_results(small_dictionary, capsys):
    solver = FrequencySolver(small_dictionary)
    print_results(benchmark(solver, small_dictionary, verbose=False))
    out = capsys.readouterr().out
    assert "Words tested: 4" in out
    assert "Average guesses: 2.2500" in out


def test_main_missing_word_list(tmp_path):
    assert main(["--words", str(tmp_path / "missing.txt")]) == 1


def test_main_single_word(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslate\nstale\nplate\n")
    assert main(["--words", str(path), "--word", "plate"]) == 0


def test_main_benchmark(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslate\nstale\nplate\n")
    assert main(["--words", str(path), "--sample", "0"]) == 0
    assert "BENCHMARK RESULTS" in capsys.readouterr().out

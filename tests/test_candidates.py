import numpy as np
import pytest

from wordle_freq.candidates import filter_candidates, narrow
from wordle_freq.feedback import LetterStatus, parse_feedback, simulate


def test_filter_keeps_consistent_words_in_order():
    remaining = ["crane", "slate", "stale", "plate"]
    result = filter_candidates(remaining, "crane", parse_feedback("--G-G"), False)
    assert result == ["slate", "stale", "plate"]


def test_incorrect_guess_is_dropped():
    remaining = ["crane", "slate"]
    result = filter_candidates(remaining, "crane", parse_feedback("GGGGG"), False)
    assert result == []


def test_correct_guess_is_kept():
    remaining = ["crane", "slate"]
    result = filter_candidates(remaining, "crane", parse_feedback("GGGGG"), True)
    assert result == ["crane"]


def test_single_mismatch_excludes():
    # stale gives GYGYG against slate, not -GGGG
    result = filter_candidates(["stale", "plate"], "slate", parse_feedback("-GGGG"), False)
    assert result == ["plate"]


def test_empty_remaining():
    assert filter_candidates([], "crane", parse_feedback("-----"), False) == []


def test_feedback_length_checked():
    with pytest.raises(ValueError):
        filter_candidates(["crane"], "slate", [LetterStatus.UNUSED] * 4, False)


def test_filter_never_drops_true_answer(sample_words):
    words = sample_words[:25]
    for guess in words:
        for answer in words:
            feedback = simulate(guess, answer)
            assert answer in filter_candidates(words, guess, feedback, guess == answer)


def test_filter_monotonic(sample_words):
    guess, answer = "stare", "plate"
    first = filter_candidates(sample_words, guess, simulate(guess, answer), False)
    assert len(first) <= len(sample_words)
    assert set(first) <= set(sample_words)

    second = filter_candidates(first, "plane", simulate("plane", answer), False)
    assert len(second) <= len(first)
    assert set(second) <= set(first)


def test_narrow_matches_word_filter(sample_dictionary):
    indices = np.arange(len(sample_dictionary))
    feedback = simulate("heart", "stare")
    narrowed = narrow(sample_dictionary, indices, "heart", feedback, False)
    expected = filter_candidates(list(sample_dictionary), "heart", feedback, False)
    assert [sample_dictionary[i] for i in narrowed] == expected
    assert "stare" in expected

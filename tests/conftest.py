import os

import pytest

from wordle_freq.words import Dictionary, load_words

WORD_LIST = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data", "wordle.txt")


@pytest.fixture
def small_dictionary():
    return Dictionary(["crane", "slate", "stale", "plate"])


@pytest.fixture(scope="session")
def sample_words():
    return load_words(WORD_LIST)


@pytest.fixture(scope="session")
def sample_dictionary(sample_words):
    return Dictionary(sample_words)

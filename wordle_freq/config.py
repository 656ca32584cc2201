import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

CONFIG = {
    # Game shape
    "word_length": 5,
    "max_guesses": 6,

    # Fixed opener (strong letter coverage)
    "first_guess": "crane",

    # Word list, one word per line
    "word_list": os.environ.get(
        "WORDLE_FREQ_WORDS", os.path.join(BASE_DIR, "data", "wordle.txt")
    ),

    # Benchmark settings
    "benchmark_sample": 500,
    "random_seed": 42,
    "progress_every": 500,
}

import random

import pytest

from wordguess.word_bank import WordBank

DICTIONARY = [
    "crane", "allot", "lilac", "robot", "boxer", "those", "abbey", "kebab",
    "babes", "sheep", "eerie", "llama", "speed", "abide", "slate", "pious",
    "mound", "tight", "cocoa", "zebra", "sorry",
]


@pytest.fixture
def make_bank():
    def _make(answers=None, dictionary=DICTIONARY, seed=1234, **kwargs):
        return WordBank(dictionary, answers, rng=random.Random(seed), **kwargs)

    return _make

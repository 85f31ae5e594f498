"""Benchmark defaults and word list locations."""

from __future__ import annotations

import os

# Workload shape
DEFAULT_MIN_LENGTH = 3
DEFAULT_MAX_LENGTH = 20
DEFAULT_BUCKET_SIZE = 15

# Record method tags
LINEAR = "linear"
TRIE = "trie"
METHODS = (LINEAR, TRIE)

# Word list
WORDS_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORDS_FILENAME = "words_alpha.txt"

WORD_LIST_PATHS = (
    WORDS_FILENAME,
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", WORDS_FILENAME),
    "/usr/share/dict/words",
)

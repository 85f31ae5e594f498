"""Word list loading and download."""

from __future__ import annotations

import logging
import os
import urllib.request

from triebench.constants import WORD_LIST_PATHS, WORDS_URL

log = logging.getLogger("triebench")

_MINIMAL_WORDS = (
    "ant", "art", "arc", "arm", "ask", "bat", "bay", "bed", "bee", "big",
    "cab", "can", "car", "cat", "cot", "cow", "cup", "dog", "day", "den",
    "ante", "anti", "army", "bath", "bear", "card", "cart", "case", "cave",
    "dove", "door", "earn", "east", "farm", "fire", "gate", "hand", "king",
    "antler", "apple", "arcade", "artist", "battle", "bearer", "carton",
    "doghouse", "earnest", "scatter", "category", "catalog", "cartoon",
)


def _normalize_line(line: str) -> str:
    return line.strip().lower()


class WordList:
    """Ordered, lower-cased word list used as the benchmark corpus.

    Order and duplicates from the file are preserved; only blank lines are
    dropped.
    """

    def __init__(self, path: str | None = None):
        self.words: list[str] = []
        self.source: str | None = None
        self._load(path)

    def _load(self, path: str | None) -> None:
        if path is not None and not os.path.exists(path):
            raise FileNotFoundError(path)

        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(WORD_LIST_PATHS)

        for candidate in search_paths:
            if os.path.exists(candidate):
                with open(candidate, "r", encoding="utf-8") as f:
                    for line in f:
                        word = _normalize_line(line)
                        if word:
                            self.words.append(word)
                # an explicit path is used even when empty
                if self.words or candidate == path:
                    self.source = candidate
                    log.info("Loaded %s words from %s", f"{len(self.words):,}", candidate)
                    return
                log.warning("Word list %s is empty -- skipping.", candidate)

        log.warning("No word list found -- using built-in minimal word list.")
        log.warning("Run with --fetch to download %s.", WORDS_URL)
        self.words = list(_MINIMAL_WORDS)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __getitem__(self, index):
        return self.words[index]

    def __contains__(self, word: str) -> bool:
        return word in self.words


def download_word_list(dest: str, url: str = WORDS_URL) -> int:
    """Download a word list to ``dest``, one lower-case alphabetic word per line.

    Returns the number of words written.
    """
    log.info("Downloading word list from %s", url)
    with urllib.request.urlopen(url) as response:
        text = response.read().decode("utf-8")

    words = [w for w in (_normalize_line(line) for line in text.splitlines()) if w.isalpha()]
    with open(dest, "w", encoding="utf-8") as f:
        for word in words:
            f.write(word + "\n")
    log.info("Wrote %s words to %s", f"{len(words):,}", dest)
    return len(words)

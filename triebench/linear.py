"""Linear substring scan that feeds its matches into a trie."""

from __future__ import annotations

from typing import Iterable

from triebench.trie import Trie


class LinearSearch:
    """Scans a corpus for words containing a query anywhere.

    Every match is inserted into ``trie`` (as both word and result), which is
    the only way the trie gets populated during a benchmark.  No case
    normalization happens here; the corpus is expected to be lower-case.
    """

    def __init__(self, trie: Trie):
        self.trie = trie

    def scan(self, query: str, corpus: Iterable[str]) -> list[str]:
        if not isinstance(query, str):
            raise TypeError(f"expected str, got {type(query).__name__}")
        matches: list[str] = []
        for item in corpus:
            if query in item:
                matches.append(item)
                self.trie.insert(item, item)
        return matches

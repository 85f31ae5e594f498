"""Benchmark harness: linear scan vs. trie lookup, one query at a time.

For each query word the harness first runs the linear substring scan, which
inserts every word it finds into the trie, and then runs the trie search for
the same word.  The trie therefore only ever contains words discovered by
earlier scans, and the order (scan, then search) is what makes the search see
the scan's matches.

Note that the two methods answer different questions: the scan returns every
corpus word that *contains* the query, while the trie returns discovered
words that *start with* it.  The comparison is kept as-is rather than
unified.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Sequence

from triebench.constants import (
    DEFAULT_BUCKET_SIZE,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    LINEAR,
    TRIE,
)
from triebench.linear import LinearSearch
from triebench.record import TimingRecord
from triebench.trie import Trie
from triebench.workload import generate_workload, workload_from_words, workload_size

logger = logging.getLogger("triebench.harness")

ProgressCallback = Callable[[int, int, str], None]


def run(
    workload: dict[int, list[str]],
    corpus: Sequence[str],
    trie: Trie,
    progress_callback: ProgressCallback | None = None,
) -> list[TimingRecord]:
    """Time both search methods for every word in ``workload``.

    Returns two records per word, ``linear`` then ``trie``, in workload
    order.  ``progress_callback`` is called with ``(done, total, word)``
    after each word.
    """
    linear = LinearSearch(trie)
    total = workload_size(workload)
    records: list[TimingRecord] = []
    done = 0

    for words in workload.values():
        for word in words:
            done += 1
            logger.debug("Progress: %d/%d: Searching for word %s", done, total, word)

            t0 = time.perf_counter()
            linear_results = linear.scan(word, corpus)
            linear_ms = (time.perf_counter() - t0) * 1000.0
            records.append(TimingRecord(LINEAR, linear_ms, len(linear_results), word))

            t0 = time.perf_counter()
            trie_results = trie.search(word)
            trie_ms = (time.perf_counter() - t0) * 1000.0
            records.append(TimingRecord(TRIE, trie_ms, len(trie_results), word))

            if progress_callback:
                progress_callback(done, total, word)

    logger.info("Benchmarked %d queries (%d words in trie)", total, len(trie))
    return records


class BenchmarkContext:
    """Corpus, trie and RNG for one benchmark run.

    The trie starts empty and is filled only by the linear scans of
    :meth:`run`.  Build a new context (or call :meth:`reset`) for an
    independent run.
    """

    def __init__(self, corpus: Sequence[str], seed: int | None = None):
        self.corpus: list[str] = list(corpus)
        self.trie = Trie()
        self.rng = random.Random(seed)

    def reset(self) -> None:
        self.trie = Trie()

    def generate_workload(
        self,
        min_len: int = DEFAULT_MIN_LENGTH,
        max_len: int = DEFAULT_MAX_LENGTH,
        bucket_size: int = DEFAULT_BUCKET_SIZE,
    ) -> dict[int, list[str]]:
        return generate_workload(self.corpus, min_len, max_len, bucket_size, self.rng)

    def run(
        self,
        workload: dict[int, list[str]],
        progress_callback: ProgressCallback | None = None,
    ) -> list[TimingRecord]:
        return run(workload, self.corpus, self.trie, progress_callback)

    def run_queries(
        self,
        words: Sequence[str],
        progress_callback: ProgressCallback | None = None,
    ) -> list[TimingRecord]:
        """Benchmark explicit query words instead of a random workload."""
        return self.run(workload_from_words(words), progress_callback)

"""Random query workload, bucketed by word length.

For every length in the requested range the generator draws words uniformly
at random from the corpus, keeping only words of that exact length, until the
bucket holds ``bucket_size`` distinct words.  Buckets the corpus cannot fill
raise :class:`WorkloadExhausted` before any sampling starts, so a short word
list fails immediately instead of spinning forever.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from triebench.constants import DEFAULT_BUCKET_SIZE, DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH

log = logging.getLogger("triebench")


class WorkloadExhausted(ValueError):
    """The corpus has too few distinct words of some length to fill a bucket."""

    def __init__(self, length: int, available: int, requested: int):
        self.length = length
        self.available = available
        self.requested = requested
        super().__init__(
            f"need {requested} distinct words of length {length}, "
            f"corpus has {available}"
        )


def generate_workload(
    corpus: Sequence[str],
    min_len: int = DEFAULT_MIN_LENGTH,
    max_len: int = DEFAULT_MAX_LENGTH,
    bucket_size: int = DEFAULT_BUCKET_SIZE,
    rng: random.Random | None = None,
) -> dict[int, list[str]]:
    """Sample ``bucket_size`` distinct words for each length in ``[min_len, max_len]``.

    Parameters
    ----------
    corpus : Sequence[str]
        Word list to draw from.  Duplicates make a word proportionally more
        likely to be drawn but it still occupies one slot in its bucket.
    min_len, max_len : int
        Inclusive range of word lengths.
    bucket_size : int
        Words per length.
    rng : random.Random | None
        Source of randomness; a fresh unseeded ``Random`` when omitted.

    Returns
    -------
    dict[int, list[str]]
        Length -> sampled words, lengths ascending, words in draw order.
    """
    if min_len < 1 or min_len > max_len:
        raise ValueError(f"invalid length range {min_len}..{max_len}")
    if bucket_size < 1:
        raise ValueError(f"bucket_size must be positive, got {bucket_size}")
    rng = rng or random.Random()

    available: dict[int, set[str]] = {}
    for word in corpus:
        if min_len <= len(word) <= max_len:
            available.setdefault(len(word), set()).add(word)

    workload: dict[int, list[str]] = {}
    for length in range(min_len, max_len + 1):
        n_available = len(available.get(length, ()))
        if n_available < bucket_size:
            raise WorkloadExhausted(length, n_available, bucket_size)

        bucket: list[str] = []
        seen: set[str] = set()
        while len(bucket) != bucket_size:
            word = corpus[rng.randrange(len(corpus))]
            if len(word) == length and word not in seen:
                seen.add(word)
                bucket.append(word)
        workload[length] = bucket

    log.debug("Workload: %s", workload)
    return workload


def workload_from_words(words: Sequence[str]) -> dict[int, list[str]]:
    """Group explicit query words by length, keeping first-seen order."""
    workload: dict[int, list[str]] = {}
    for word in words:
        bucket = workload.setdefault(len(word), [])
        if word not in bucket:
            bucket.append(word)
    return workload


def workload_size(workload: dict[int, list[str]]) -> int:
    return sum(len(words) for words in workload.values())

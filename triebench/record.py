"""Timing record for a single search call."""

from __future__ import annotations


class TimingRecord:
    """How long one search method took for one query, and how much it found."""

    __slots__ = ("method", "elapsed_ms", "match_count", "query")

    def __init__(self, method: str, elapsed_ms: float, match_count: int, query: str):
        self.method = method          # 'linear' or 'trie'
        self.elapsed_ms = elapsed_ms
        self.match_count = match_count
        self.query = query

    def as_dict(self) -> dict:
        return {
            "method": self.method,
            "elapsed_ms": self.elapsed_ms,
            "match_count": self.match_count,
            "query": self.query,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimingRecord):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return (
            f"TimingRecord({self.method!r}, {self.elapsed_ms:.3f} ms, "
            f"{self.match_count} items, query={self.query!r})"
        )

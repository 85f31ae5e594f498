"""Aggregate timing records per method and per query length."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from triebench.constants import METHODS
from triebench.record import TimingRecord


class MethodSummary:
    """Timing statistics for one method, over all lengths or a single one."""

    __slots__ = (
        "method", "length", "runs", "mean_ms", "median_ms",
        "min_ms", "max_ms", "total_ms", "mean_matches",
    )

    def __init__(
        self,
        method: str,
        length: int | None,
        runs: int,
        mean_ms: float,
        median_ms: float,
        min_ms: float,
        max_ms: float,
        total_ms: float,
        mean_matches: float,
    ):
        self.method = method
        self.length = length  # None for the all-lengths row
        self.runs = runs
        self.mean_ms = mean_ms
        self.median_ms = median_ms
        self.min_ms = min_ms
        self.max_ms = max_ms
        self.total_ms = total_ms
        self.mean_matches = mean_matches

    def __repr__(self) -> str:
        scope = "all" if self.length is None else f"len={self.length}"
        return (
            f"{self.method} [{scope}] runs={self.runs} "
            f"mean={self.mean_ms:.3f}ms median={self.median_ms:.3f}ms"
        )


def _summarize(method: str, length: int | None, records: list[TimingRecord]) -> MethodSummary:
    times = np.array([r.elapsed_ms for r in records], dtype=float)
    matches = np.array([r.match_count for r in records], dtype=float)
    return MethodSummary(
        method=method,
        length=length,
        runs=len(records),
        mean_ms=float(times.mean()),
        median_ms=float(np.median(times)),
        min_ms=float(times.min()),
        max_ms=float(times.max()),
        total_ms=float(times.sum()),
        mean_matches=float(matches.mean()),
    )


def summarize(records: Iterable[TimingRecord], by_length: bool = True) -> list[MethodSummary]:
    """One overall row per method (linear first), each followed by its
    per-length rows when ``by_length`` is set."""
    by_method: dict[str, list[TimingRecord]] = {}
    for rec in records:
        by_method.setdefault(rec.method, []).append(rec)

    order = [m for m in METHODS if m in by_method]
    order += sorted(m for m in by_method if m not in METHODS)

    rows: list[MethodSummary] = []
    for method in order:
        recs = by_method[method]
        rows.append(_summarize(method, None, recs))
        if by_length:
            by_len: dict[int, list[TimingRecord]] = {}
            for rec in recs:
                by_len.setdefault(len(rec.query), []).append(rec)
            for length in sorted(by_len):
                rows.append(_summarize(method, length, by_len[length]))
    return rows


def speedup(records: Iterable[TimingRecord]) -> float | None:
    """Total linear time divided by total trie time."""
    totals: dict[str, float] = {}
    for rec in records:
        totals[rec.method] = totals.get(rec.method, 0.0) + rec.elapsed_ms
    linear = totals.get(METHODS[0], 0.0)
    trie = totals.get(METHODS[1], 0.0)
    if linear <= 0.0 or trie <= 0.0:
        return None
    return linear / trie

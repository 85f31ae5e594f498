"""Terminal output for benchmark runs."""

from __future__ import annotations

import logging
import time

from triebench.harness import BenchmarkContext
from triebench.record import TimingRecord
from triebench.summary import MethodSummary, speedup, summarize
from triebench.workload import WorkloadExhausted

log = logging.getLogger("triebench")


def print_records(records: list[TimingRecord]) -> None:
    """Print one row per record: Method, Time(ms), Items, Query."""
    print("=" * 60)
    print(f" {'Method':<8} {'Time(ms)':>12} {'Items':>8}   Query")
    print("-" * 60)
    for rec in records:
        print(f" {rec.method:<8} {rec.elapsed_ms:>12.4f} {rec.match_count:>8}   {rec.query}")
    print("=" * 60)


def print_summary(rows: list[MethodSummary], ratio: float | None = None) -> None:
    """Print the per-method timing summary, then the linear/trie ratio if known."""
    print("=" * 78)
    print(
        f" {'Method':<8} {'Len':>4} {'Runs':>5} {'Mean':>10} {'Median':>10} "
        f"{'Min':>10} {'Max':>10} {'Items':>9}"
    )
    print("-" * 78)
    for row in rows:
        length = "all" if row.length is None else str(row.length)
        print(
            f" {row.method:<8} {length:>4} {row.runs:>5} {row.mean_ms:>10.4f} "
            f"{row.median_ms:>10.4f} {row.min_ms:>10.4f} {row.max_ms:>10.4f} "
            f"{row.mean_matches:>9.1f}"
        )
    print("=" * 78)
    if ratio is not None:
        print(f"\nLinear / trie total time: {ratio:.1f}x")


def run_cli(
    corpus: list[str],
    min_len: int,
    max_len: int,
    bucket_size: int,
    seed: int | None = None,
    queries: list[str] | None = None,
    show_table: bool = True,
) -> int:
    """Run one benchmark and print its results.  Returns an exit status."""
    context = BenchmarkContext(corpus, seed=seed)

    if queries:
        print(f"\nBenchmarking {len(queries)} given queries over {len(corpus):,} words...\n")
        t0 = time.time()
        records = context.run_queries(queries)
    else:
        try:
            workload = context.generate_workload(min_len, max_len, bucket_size)
        except WorkloadExhausted as exc:
            log.error("Cannot build workload: %s", exc)
            return 1
        print(
            f"\nBenchmarking {bucket_size} words per length {min_len}..{max_len} "
            f"over {len(corpus):,} words...\n"
        )
        t0 = time.time()
        records = context.run(workload)
    elapsed = time.time() - t0

    print(f"Ran {len(records)} searches in {elapsed:.2f}s.\n")

    if show_table:
        print_records(records)
        print()
    print_summary(summarize(records), speedup(records))
    print(
        "\nNote: linear scan matches the query anywhere in a word; the trie "
        "only returns\nprefix matches among words earlier scans have found."
    )
    return 0

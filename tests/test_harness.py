"""Tests for the benchmark harness."""

import pytest

from triebench.constants import LINEAR, TRIE
from triebench.harness import BenchmarkContext, run
from triebench.trie import Trie
from triebench.workload import WorkloadExhausted

CORPUS = ["ant", "art", "antler", "apple"]


def test_end_to_end_single_word():
    trie = Trie()
    records = run({3: ["ant"]}, CORPUS, trie)

    assert [r.method for r in records] == [LINEAR, TRIE]
    assert [r.query for r in records] == ["ant", "ant"]
    assert records[0].match_count == 2  # "ant" and "antler"
    assert records[1].match_count == 2
    assert all(r.elapsed_ms >= 0.0 for r in records)
    assert "antler" in trie
    assert "apple" not in trie


def test_records_follow_workload_order():
    records = run({3: ["art", "ant"], 5: ["apple"]}, CORPUS, Trie())
    assert len(records) == 6
    assert [(r.method, r.query) for r in records] == [
        (LINEAR, "art"), (TRIE, "art"),
        (LINEAR, "ant"), (TRIE, "ant"),
        (LINEAR, "apple"), (TRIE, "apple"),
    ]


def test_trie_counts_reflect_search_history():
    corpus = ["cart", "car", "scar"]
    records = run({4: ["cart"], 3: ["car"]}, corpus, Trie())
    counts = [(r.method, r.query, r.match_count) for r in records]
    assert counts == [
        (LINEAR, "cart", 1),
        (TRIE, "cart", 1),
        # scan finds car, cart and scar; trie only has car-prefixed words
        (LINEAR, "car", 3),
        (TRIE, "car", 2),
    ]


def test_progress_callback():
    seen = []
    run({3: ["ant", "art"]}, CORPUS, Trie(), progress_callback=lambda *a: seen.append(a))
    assert seen == [(1, 2, "ant"), (2, 2, "art")]


def test_empty_workload():
    assert run({}, CORPUS, Trie()) == []


def test_context_runs_generated_workload():
    context = BenchmarkContext(CORPUS, seed=3)
    workload = context.generate_workload(3, 3, 2)
    assert sorted(workload[3]) == ["ant", "art"]

    records = context.run(workload)
    assert len(records) == 4
    assert len(context.trie) == 3  # ant, art, antler


def test_context_seed_is_reproducible():
    corpus = [f"w{i:02d}" for i in range(50)]
    a = BenchmarkContext(corpus, seed=11).generate_workload(3, 3, 5)
    b = BenchmarkContext(corpus, seed=11).generate_workload(3, 3, 5)
    assert a == b


def test_context_reset_discards_trie():
    context = BenchmarkContext(CORPUS)
    context.run_queries(["ant"])
    assert len(context.trie) == 2
    context.reset()
    assert len(context.trie) == 0
    assert context.trie.search("ant") == []


def test_context_owns_its_corpus():
    corpus = list(CORPUS)
    context = BenchmarkContext(corpus)
    corpus.append("anthem")
    records = context.run_queries(["ant"])
    assert records[0].match_count == 2


def test_context_workload_exhausted():
    with pytest.raises(WorkloadExhausted):
        BenchmarkContext(CORPUS, seed=0).generate_workload(3, 4, 1)

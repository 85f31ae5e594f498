"""Tests for timing summaries."""

import pytest

from triebench.record import TimingRecord
from triebench.summary import speedup, summarize


def _records():
    return [
        TimingRecord("linear", 4.0, 2, "ant"),
        TimingRecord("trie", 1.0, 2, "ant"),
        TimingRecord("linear", 8.0, 1, "apple"),
        TimingRecord("trie", 3.0, 1, "apple"),
    ]


def test_overall_rows():
    rows = summarize(_records(), by_length=False)
    assert [r.method for r in rows] == ["linear", "trie"]
    linear, trie = rows
    assert linear.length is None
    assert linear.runs == 2
    assert linear.mean_ms == pytest.approx(6.0)
    assert linear.median_ms == pytest.approx(6.0)
    assert linear.min_ms == pytest.approx(4.0)
    assert linear.max_ms == pytest.approx(8.0)
    assert linear.total_ms == pytest.approx(12.0)
    assert linear.mean_matches == pytest.approx(1.5)
    assert trie.total_ms == pytest.approx(4.0)


def test_per_length_rows():
    rows = summarize(_records())
    assert [(r.method, r.length) for r in rows] == [
        ("linear", None), ("linear", 3), ("linear", 5),
        ("trie", None), ("trie", 3), ("trie", 5),
    ]
    assert rows[2].mean_ms == pytest.approx(8.0)


def test_empty():
    assert summarize([]) == []
    assert speedup([]) is None


def test_speedup():
    assert speedup(_records()) == pytest.approx(3.0)
    assert speedup([TimingRecord("linear", 1.0, 1, "a")]) is None


def test_record_dict():
    rec = TimingRecord("trie", 0.5, 3, "cat")
    assert rec.as_dict() == {"method": "trie", "elapsed_ms": 0.5, "match_count": 3, "query": "cat"}
    assert rec == TimingRecord("trie", 0.5, 3, "cat")

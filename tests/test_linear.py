"""Tests for the linear scan and the trie it populates."""

import pytest

from triebench.linear import LinearSearch
from triebench.trie import Trie


def test_scan_matches_substrings_in_order():
    linear = LinearSearch(Trie())
    corpus = ["scatter", "cat", "dog", "concatenate"]
    assert linear.scan("cat", corpus) == ["scatter", "cat", "concatenate"]


def test_scan_is_case_sensitive():
    linear = LinearSearch(Trie())
    assert linear.scan("cat", ["CAT", "cat"]) == ["cat"]


def test_scan_populates_trie_lazily():
    trie = Trie()
    linear = LinearSearch(trie)
    corpus = ["dog", "doghouse"]

    assert trie.search("dog") == []
    assert linear.scan("dog", corpus) == ["dog", "doghouse"]
    assert trie.search("dog") == [["dog"], ["doghouse"]]


def test_unscanned_words_stay_out_of_trie():
    trie = Trie()
    linear = LinearSearch(trie)
    corpus = ["cat", "catalog", "dog"]
    linear.scan("cat", corpus)
    assert "dog" not in trie
    assert trie.search("dog") == []


def test_scan_results_accumulate_across_queries():
    trie = Trie()
    linear = LinearSearch(trie)
    corpus = ["cart", "art"]
    linear.scan("art", corpus)
    linear.scan("car", corpus)
    assert trie.results_by_word["cart"] == ["cart", "cart"]
    assert trie.results_by_word["art"] == ["art"]


def test_trie_misses_substring_matches_the_scan_found():
    trie = Trie()
    linear = LinearSearch(trie)
    found = linear.scan("cat", ["scatter", "cat"])
    assert len(found) == 2
    assert trie.search("cat") == [["cat"]]


def test_scan_rejects_non_string():
    with pytest.raises(TypeError):
        LinearSearch(Trie()).scan(3, ["abc"])

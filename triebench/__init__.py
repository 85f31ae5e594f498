"""Trie Benchmark -- linear substring scan vs. trie prefix search."""

from triebench.constants import LINEAR, TRIE
from triebench.trie import Trie, TrieNode
from triebench.linear import LinearSearch
from triebench.record import TimingRecord
from triebench.workload import WorkloadExhausted, generate_workload
from triebench.harness import BenchmarkContext, run
from triebench.summary import MethodSummary, speedup, summarize
from triebench.corpus import WordList, download_word_list

__version__ = "0.1.0"

__all__ = [
    "LINEAR",
    "TRIE",
    "BenchmarkContext",
    "LinearSearch",
    "MethodSummary",
    "TimingRecord",
    "Trie",
    "TrieNode",
    "WordList",
    "WorkloadExhausted",
    "download_word_list",
    "generate_workload",
    "run",
    "speedup",
    "summarize",
]

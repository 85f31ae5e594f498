#!/usr/bin/env python3
"""
Trie Benchmark

Compares a linear substring scan against a character-trie prefix lookup
over a word list, timing both methods for randomly sampled query words of
each length.  The trie starts empty and is filled by the linear scans.

Download a word list first with --fetch, or point --words at any file with
one word per line.
"""

from __future__ import annotations

import argparse
import logging
import sys

from triebench.cli import run_cli
from triebench.constants import (
    DEFAULT_BUCKET_SIZE,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    WORDS_FILENAME,
)
from triebench.corpus import WordList, download_word_list

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("triebench")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trie Benchmark -- linear substring scan vs. trie prefix search",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--min-length", type=int, default=DEFAULT_MIN_LENGTH,
                        help="Shortest query length (default: %(default)s)")
    parser.add_argument("--max-length", type=int, default=DEFAULT_MAX_LENGTH,
                        help="Longest query length (default: %(default)s)")
    parser.add_argument("--bucket-size", type=int, default=DEFAULT_BUCKET_SIZE,
                        help="Query words per length (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for query sampling")
    parser.add_argument("--query", action="append", default=None,
                        help="Benchmark this word instead of a random workload (repeatable)")
    parser.add_argument("--fetch", action="store_true",
                        help=f"Download the word list to {WORDS_FILENAME} (or --words) first")
    parser.add_argument("--no-table", action="store_true",
                        help="Only print the summary, not every record")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("TRIE BENCHMARK -- linear scan vs. trie search")

    if args.fetch:
        try:
            download_word_list(args.words or WORDS_FILENAME)
        except OSError as exc:
            log.error("Could not download word list: %s", exc)
            return 1

    try:
        corpus = WordList(args.words)
    except FileNotFoundError as exc:
        log.error("Word list not found: %s", exc)
        return 1

    return run_cli(
        corpus.words,
        args.min_length,
        args.max_length,
        args.bucket_size,
        seed=args.seed,
        queries=args.query,
        show_table=not args.no_table,
    )


if __name__ == "__main__":
    sys.exit(main())

"""Autocomplete -- trie-backed prefix index."""

from autocomplete.trie import IndexFullError, PrefixIndex, TrieNode
from autocomplete.locking import LockedPrefixIndex
from autocomplete.dictionary import WordList, read_words
from autocomplete.bench import BenchResult, linear_scan, run_benchmark

__all__ = [
    "BenchResult",
    "IndexFullError",
    "LockedPrefixIndex",
    "PrefixIndex",
    "TrieNode",
    "WordList",
    "linear_scan",
    "read_words",
    "run_benchmark",
]

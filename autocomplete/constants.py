"""Defaults for the autocomplete package."""

from __future__ import annotations

import os

# Word-list files tried in order when no explicit path is given.
DEFAULT_SEARCH_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]

# Used when none of the search paths yields a word.
BUILTIN_WORDS: list[str] = [
    "flatware", "clash", "twin", "escape", "describe",
    "golf", "communication", "coffee", "split", "language",
]

# Maximum suggestions printed per query by the CLI (0 = unlimited).
DEFAULT_LIMIT = 20

# Benchmark defaults
BENCH_PREFIX = "zq"
BENCH_MATCHES: list[str] = ["zqa", "zqab", "zqb", "zqbc", "zqc", "zqcd", "zqx", "zqyz"]
BENCH_SIZES: tuple[int, ...] = (1_000, 10_000, 100_000)
BENCH_REPEATS = 50

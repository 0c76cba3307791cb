"""Query latency benchmark: prefix index vs. linear scan.

For each dictionary size the benchmark builds a word list made of a
fixed set of matching words plus random filler that never starts with
the query prefix, then times the same query against:

  1. ``PrefixIndex.find_matches``, whose cost depends only on the prefix
     length and the number of matches, and
  2. ``linear_scan``, which has to look at every stored word.

The index column should stay flat as the dictionary grows while the scan
column grows linearly.
"""

from __future__ import annotations

import logging
import random
import string
import time
from typing import Callable, Sequence

import numpy as np

from autocomplete import constants
from autocomplete.trie import PrefixIndex

logger = logging.getLogger("autocomplete.bench")


class BenchResult:
    """Latency summary for one dictionary size (seconds)."""

    __slots__ = ("size", "matches", "index_median", "index_p95", "scan_median", "scan_p95")

    def __init__(
        self,
        size: int,
        matches: int,
        index_median: float,
        index_p95: float,
        scan_median: float,
        scan_p95: float,
    ):
        self.size = size
        self.matches = matches
        self.index_median = index_median
        self.index_p95 = index_p95
        self.scan_median = scan_median
        self.scan_p95 = scan_p95

    @property
    def speedup(self) -> float:
        if self.index_median == 0:
            return float("inf")
        return self.scan_median / self.index_median

    def __repr__(self) -> str:
        return (
            f"BenchResult(size={self.size}, index={self.index_median * 1e6:.1f}us, "
            f"scan={self.scan_median * 1e6:.1f}us)"
        )


def linear_scan(words: Sequence[str], prefix: str) -> list[str]:
    """Baseline: sorted words starting with *prefix*, found by checking every word."""
    return sorted(w for w in words if w.startswith(prefix))


def time_query(fn: Callable[[str], object], prefix: str, repeats: int) -> np.ndarray:
    """Per-call wall time of ``fn(prefix)`` over *repeats* calls."""
    samples = np.empty(repeats, dtype=np.float64)
    for i in range(repeats):
        t0 = time.perf_counter()
        fn(prefix)
        samples[i] = time.perf_counter() - t0
    return samples


FILLER_MIN_LEN = 3
FILLER_MAX_LEN = 10


def filler_capacity(prefix: str) -> int:
    """Number of distinct filler words available for *prefix*."""
    n = len(string.ascii_lowercase)
    total = 0
    for length in range(FILLER_MIN_LEN, FILLER_MAX_LEN + 1):
        total += n ** length
        # Lowercase words of this length that start with the prefix are excluded.
        if all(ch in string.ascii_lowercase for ch in prefix) and length >= len(prefix):
            total -= n ** (length - len(prefix))
    return total


def filler_words(count: int, prefix: str, rng: random.Random) -> list[str]:
    """*count* distinct random lowercase words, none starting with *prefix*."""
    if not prefix:
        raise ValueError("prefix must be non-empty: every word starts with \"\"")
    if count > filler_capacity(prefix):
        raise ValueError(f"cannot make {count} distinct filler words for prefix {prefix!r}")
    words: set[str] = set()
    letters = string.ascii_lowercase
    while len(words) < count:
        word = "".join(rng.choice(letters) for _ in range(rng.randint(FILLER_MIN_LEN, FILLER_MAX_LEN)))
        if not word.startswith(prefix):
            words.add(word)
    return sorted(words)


def run_benchmark(
    prefix: str = constants.BENCH_PREFIX,
    matches: Sequence[str] = tuple(constants.BENCH_MATCHES),
    sizes: Sequence[int] = constants.BENCH_SIZES,
    repeats: int = constants.BENCH_REPEATS,
    seed: int | None = 0,
) -> list[BenchResult]:
    """Time a fixed-prefix query across growing dictionaries.

    Parameters
    ----------
    prefix : str
        Query prefix; every word in *matches* must start with it.
    matches : Sequence[str]
        The fixed match set present in every dictionary.
    sizes : Sequence[int]
        Number of filler words per run.
    repeats : int
        Timed calls per run and per method.
    seed : int | None
        RNG seed for the filler words.
    """
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    if not prefix:
        raise ValueError("prefix must be non-empty")
    bad = [m for m in matches if not m.startswith(prefix)]
    if bad:
        raise ValueError(f"match words {bad!r} do not start with {prefix!r}")

    rng = random.Random(seed)
    expected = sorted(set(matches))
    results: list[BenchResult] = []

    for size in sizes:
        words = filler_words(size, prefix, rng) + list(matches)
        index = PrefixIndex(words)

        found = index.find_matches(prefix)
        if found != expected or linear_scan(words, prefix) != expected:
            raise RuntimeError(f"benchmark self-check failed for size {size}")

        idx = time_query(index.find_matches, prefix, repeats)
        scan = time_query(lambda p: linear_scan(words, p), prefix, repeats)

        result = BenchResult(
            size=len(words),
            matches=len(found),
            index_median=float(np.median(idx)),
            index_p95=float(np.percentile(idx, 95)),
            scan_median=float(np.median(scan)),
            scan_p95=float(np.percentile(scan, 95)),
        )
        logger.debug("%r", result)
        results.append(result)

    return results


def format_results(results: Sequence[BenchResult]) -> str:
    lines = [
        f"{'Words':>9}  {'Matches':>7}  {'Index med':>10}  {'Index p95':>10}  "
        f"{'Scan med':>10}  {'Scan p95':>10}  {'Speedup':>8}",
        "-" * 77,
    ]
    for r in results:
        lines.append(
            f"{r.size:>9,}  {r.matches:>7}  {r.index_median * 1e6:>8.1f}us  "
            f"{r.index_p95 * 1e6:>8.1f}us  {r.scan_median * 1e6:>8.1f}us  "
            f"{r.scan_p95 * 1e6:>8.1f}us  {r.speedup:>7.1f}x"
        )
    return "\n".join(lines)

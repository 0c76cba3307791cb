"""Thread-safe wrapper around :class:`PrefixIndex`.

One re-entrant lock guards every read and write, so concurrent inserts
never race on a child mapping and a query sees the index either before
or after an insertion, never in between.
"""

from __future__ import annotations

import threading
from typing import Iterable, Iterator

from autocomplete.trie import PrefixIndex


class LockedPrefixIndex:
    """A :class:`PrefixIndex` shared between threads."""

    def __init__(self, index: PrefixIndex | None = None):
        self.index = index if index is not None else PrefixIndex()
        self._lock = threading.RLock()

    def insert(self, word: str) -> None:
        with self._lock:
            self.index.insert(word)

    def extend(self, words: Iterable[str]) -> None:
        """Insert a batch while holding the lock, so no reader runs in the middle of it.

        Not transactional: if an insert fails part-way (``IndexFullError``),
        the words before it stay in the index.
        """
        words = list(words)
        with self._lock:
            self.index.extend(words)

    def find_matches(self, prefix: str, limit: int | None = None) -> list[str]:
        with self._lock:
            return self.index.find_matches(prefix, limit)

    def iter_matches(self, prefix: str) -> Iterator[str]:
        # Snapshot under the lock; a live generator would outlive it.
        with self._lock:
            return iter(self.index.find_matches(prefix))

    def is_word(self, word: str) -> bool:
        with self._lock:
            return self.index.is_word(word)

    def is_prefix(self, prefix: str) -> bool:
        with self._lock:
            return self.index.is_prefix(prefix)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self.index

    def __len__(self) -> int:
        with self._lock:
            return len(self.index)

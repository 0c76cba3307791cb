"""Prefix trie for autocomplete lookups.

Stores a growing set of strings and answers "every stored string that
starts with P" in time proportional to ``len(P)`` plus the size of the
matching subtree, independent of how many unrelated words are stored.

Characters are compared literally: no case folding or normalisation.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator


class IndexFullError(MemoryError):
    """Inserting a word would exceed the index's node budget."""


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal", "value")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.value: str | None = None  # stored word, only when terminal


class PrefixIndex:
    """Insert-only word set with prefix-match retrieval.

    Parameters
    ----------
    words : Iterable[str] | None
        Optional initial words, inserted in order.
    max_nodes : int | None
        Upper bound on the number of nodes (root included).  An insertion
        that would cross it raises :class:`IndexFullError` and leaves the
        index untouched.  ``None`` means unbounded.
    """

    def __init__(self, words: Iterable[str] | None = None, max_nodes: int | None = None):
        if max_nodes is not None and max_nodes < 1:
            raise ValueError("max_nodes must be at least 1 (the root)")
        self.root = TrieNode()
        self.max_nodes = max_nodes
        self.node_count = 1
        self._size = 0
        if words is not None:
            self.extend(words)

    def insert(self, word: str) -> None:
        """Add *word*.  Re-inserting a stored word changes nothing."""
        _require_str(word, "word")
        node = self.root
        depth = 0
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            depth += 1
        else:
            if not node.is_terminal:
                node.is_terminal = True
                node.value = word
                self._size += 1
            return

        suffix = word[depth:]
        if self.max_nodes is not None and self.node_count + len(suffix) > self.max_nodes:
            raise IndexFullError(
                f"inserting {word!r} needs {len(suffix)} new nodes, "
                f"{self.max_nodes - self.node_count} left"
            )

        # Build the missing branch detached, then link it with one assignment
        # so a failure part-way through never leaves a dangling branch.
        tail = TrieNode()
        tail.is_terminal = True
        tail.value = word
        for ch in reversed(suffix[1:]):
            parent = TrieNode()
            parent.children[ch] = tail
            tail = parent
        node.children[suffix[0]] = tail

        self.node_count += len(suffix)
        self._size += 1

    def extend(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def iter_matches(self, prefix: str) -> Iterator[str]:
        """Lazily yield stored words starting with *prefix*, in sorted order."""
        _require_str(prefix, "prefix")
        node = self._walk(prefix)
        if node is None:
            return iter(())
        return self._iter_subtree(node)

    def find_matches(self, prefix: str, limit: int | None = None) -> list[str]:
        """All stored words starting with *prefix*, sorted by code point.

        Returns an empty list when nothing matches.  With *limit*, the walk
        stops as soon as that many words have been collected.
        """
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        return list(islice(self.iter_matches(prefix), limit))

    def is_word(self, word: str) -> bool:
        _require_str(word, "word")
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        _require_str(prefix, "prefix")
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return self._iter_subtree(self.root)

    def __repr__(self) -> str:
        return f"PrefixIndex(words={self._size}, nodes={self.node_count})"

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _iter_subtree(start: TrieNode) -> Iterator[str]:
        # Pre-order walk with an explicit stack; children are pushed in
        # reverse sorted order so they pop in ascending order.
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                yield node.value
            children = node.children
            if children:
                stack.extend(children[ch] for ch in sorted(children, reverse=True))

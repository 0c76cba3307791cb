"""Word list loading into a prefix index."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from autocomplete import constants
from autocomplete.trie import PrefixIndex

log = logging.getLogger("autocomplete")


def read_words(path: str) -> Iterator[str]:
    """Yield the words of a one-word-per-line UTF-8 file.

    Surrounding whitespace is stripped; blank lines and ``#`` comments are
    skipped.  Case is preserved.
    """
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                yield word


class WordList:
    """Dictionary sourced from the first usable word-list file.

    An explicit *path* is tried first and its read errors propagate; the
    default search paths are tried after it, and if none yields a word the
    built-in list is used.
    """

    def __init__(
        self,
        path: str | None = None,
        index: PrefixIndex | None = None,
        search_paths: Iterable[str] | None = None,
    ):
        self.index = index if index is not None else PrefixIndex()
        self.source: str | None = None
        self._load(path, search_paths)

    def _load(self, path: str | None, search_paths: Iterable[str] | None) -> None:
        if path is not None:
            if os.path.exists(path):
                if self._load_file(path):
                    return
                log.warning("No words in %s -- trying default locations.", path)
            else:
                log.warning("Word list %s not found -- trying default locations.", path)

        if search_paths is None:
            search_paths = constants.DEFAULT_SEARCH_PATHS

        for candidate in search_paths:
            if not os.path.exists(candidate):
                log.debug("No word list at %s", candidate)
                continue
            try:
                if self._load_file(candidate):
                    return
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Skipping %s: %s", candidate, exc)

        log.warning("No word list found -- using built-in minimal word list.")
        self.index.extend(constants.BUILTIN_WORDS)

    def _load_file(self, path: str) -> bool:
        # Read the whole file first so a decode error part-way leaves the index alone.
        words = list(read_words(path))
        before = len(self.index)
        self.index.extend(words)
        added = len(self.index) - before
        if not added:
            return False
        self.source = path
        log.info("Loaded %s words from %s", f"{added:,}", path)
        return True

    def suggest(self, prefix: str, limit: int | None = None) -> list[str]:
        return self.index.find_matches(prefix, limit)

    def __contains__(self, word: object) -> bool:
        return word in self.index

    def __len__(self) -> int:
        return len(self.index)

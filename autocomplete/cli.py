"""CLI / terminal mode for the autocomplete index."""

from __future__ import annotations

import time

from autocomplete.dictionary import WordList
from autocomplete.trie import IndexFullError, PrefixIndex


def print_matches(index: PrefixIndex, prefix: str, limit: int | None = None) -> int:
    """Print the matches for *prefix*, one per line.  Returns the number shown."""
    t0 = time.perf_counter()
    # One extra match tells us whether the list was cut short.
    matches = index.find_matches(prefix, None if limit is None else limit + 1)
    elapsed = time.perf_counter() - t0

    truncated = limit is not None and len(matches) > limit
    if truncated:
        matches = matches[:limit]

    if not matches:
        print(f"  No matches for '{prefix}'.")
        return 0

    for word in matches:
        print(f"  {word}")
    more = f" (first {limit})" if truncated else ""
    print(f"  {len(matches)} match{'es' if len(matches) != 1 else ''}{more} in {elapsed * 1000:.2f} ms")
    return len(matches)


def run_cli(word_list: WordList, limit: int | None = None) -> None:
    """Interactive prefix lookups from the terminal."""
    index = word_list.index
    print("\n" + "=" * 60)
    print("  AUTOCOMPLETE -- Prefix Lookup")
    print("=" * 60)
    print()
    print(f"  {len(index):,} words loaded from {word_list.source or 'built-in list'}")
    print()
    print("Commands:")
    print("  PREFIX                -- list stored words starting with PREFIX")
    print("  :add WORD [WORD ...]  -- add words to the index")
    print("  :count                -- number of stored words")
    print("  :quit                 -- exit")
    print("  (an empty line lists every word)")
    print()

    while True:
        try:
            line = input("prefix> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":count":
            print(f"  {len(index):,} words")
            continue
        if cmd == ":add" or cmd.startswith(":add "):
            words = cmd.split()[1:]
            if not words:
                print("  Format: :add WORD [WORD ...]")
                continue
            try:
                for word in words:
                    index.insert(word)
            except IndexFullError as exc:
                print(f"  Index full: {exc}")
                continue
            print(f"  Added {len(words)} word{'s' if len(words) != 1 else ''}.")
            continue

        print_matches(index, line, limit)

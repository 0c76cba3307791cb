"""Entry point: ``python -m autocomplete`` or the ``autocomplete`` script."""

from __future__ import annotations

import argparse
import logging

from autocomplete import constants
from autocomplete.bench import format_results, run_benchmark
from autocomplete.cli import print_matches, run_cli
from autocomplete.dictionary import WordList

log = logging.getLogger("autocomplete")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="autocomplete",
        description="Prefix autocomplete over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--query", "-q", action="append", default=None, metavar="PREFIX",
                        help="Print matches for PREFIX and exit (repeatable)")
    parser.add_argument("--limit", type=int, default=constants.DEFAULT_LIMIT,
                        help="Maximum matches shown per query, 0 for all "
                             f"(default {constants.DEFAULT_LIMIT})")
    parser.add_argument("--bench", action="store_true",
                        help="Benchmark prefix queries against a linear scan")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.limit < 0:
        parser.error("--limit must be >= 0")
    limit = args.limit or None

    if args.bench:
        print(format_results(run_benchmark()))
        return 0

    try:
        word_list = WordList(args.dict)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Could not read word list %s: %s", args.dict, exc)
        return 1

    if args.query is not None:
        for prefix in args.query:
            print(f"{prefix}:")
            print_matches(word_list.index, prefix, limit)
        return 0

    run_cli(word_list, limit)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# apps/cli/query.py
"""
Dictionary queries from the command line.

Subcommands:
  exists WORD                      -> true/false
  prefix PREFIX                    -> words starting with PREFIX
  search [--start C] [--end C] [--length N]
  palindromes                      -> palindromic words (sorted)
  subwords WORD [--min-length M]   -> sub-words of WORD (sorted)
  random [--length N] [--seed S]   -> one random word
  scramble WORD [--seed S]         -> WORD with letters shuffled
"""

from __future__ import annotations

import argparse
import random
import sys

from packages.engine import (
    by_prefix, by_search, exists, generate_sub_words, palindromes, pick_random_word, scramble,
)
from packages.lexicon import DictionaryIndex

DEFAULT_WORDS = "packages/lexicon/data/words.txt"


def _print_words(words) -> None:
    for w in words:
        print(w)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="jumble — dictionary queries")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="path to the dictionary (one word per line)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("exists", help="is WORD in the dictionary?")
    p.add_argument("word")

    p = sub.add_parser("prefix", help="words starting with PREFIX")
    p.add_argument("prefix")

    p = sub.add_parser("search", help="filter by first letter, last letter, length")
    p.add_argument("--start")
    p.add_argument("--end")
    p.add_argument("--length", type=int)

    sub.add_parser("palindromes", help="palindromic words")

    p = sub.add_parser("subwords", help="dictionary words spelled from WORD's letters")
    p.add_argument("word")
    p.add_argument("--min-length", type=int, default=3)
    p.add_argument("--max-seed-length", type=int, default=10, help="0 = no limit")

    p = sub.add_parser("random", help="one random word")
    p.add_argument("--length", type=int)
    p.add_argument("--seed", type=int)

    p = sub.add_parser("scramble", help="shuffle the letters of WORD")
    p.add_argument("word")
    p.add_argument("--seed", type=int)
    return ap


def main(argv=None):
    args = _build_parser().parse_args(argv)
    index = DictionaryIndex.from_file(args.words)

    try:
        if args.cmd == "exists":
            print("true" if exists(index, args.word) else "false")
        elif args.cmd == "prefix":
            _print_words(by_prefix(index, args.prefix))
        elif args.cmd == "search":
            _print_words(by_search(index, args.start, args.end, args.length))
        elif args.cmd == "palindromes":
            _print_words(sorted(palindromes(index)))
        elif args.cmd == "subwords":
            found = generate_sub_words(index, args.word, args.min_length,
                                       max_length=args.max_seed_length or None)
            _print_words(sorted(found))
        elif args.cmd == "random":
            w = pick_random_word(index, args.length, rng=random.Random(args.seed))
            if w is None:
                print("no matching word", file=sys.stderr)
                sys.exit(1)
            print(w)
        elif args.cmd == "scramble":
            print(scramble(args.word, rng=random.Random(args.seed)))
    except (ValueError, LookupError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()

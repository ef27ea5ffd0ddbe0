# apps/cli/play.py
"""
Play one jumble puzzle in the terminal.

The scrambled seed is shown; type sub-words to solve them.
Commands: `?` shows progress, `!` gives up and reveals the answers,
an empty line quits.
"""

from __future__ import annotations

import argparse
import random
import sys

from packages.engine import create_puzzle
from packages.engine.session import guess, is_complete, progress, remaining
from packages.lexicon import DictionaryIndex

DEFAULT_WORDS = "packages/lexicon/data/words.txt"


def _status(puzzle) -> str:
    solved, total = progress(puzzle)
    return f"[{puzzle.scrambled.upper()}] solved {solved}/{total}"


def main():
    ap = argparse.ArgumentParser(description="jumble — play a puzzle")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="path to the dictionary (one word per line)")
    ap.add_argument("--length", type=int, default=6, help="seed word length (>= 3)")
    ap.add_argument("--min-length", type=int, default=3, help="shortest sub-word to accept")
    ap.add_argument("--seed", type=int, help="RNG seed (replay the same puzzle)")
    args = ap.parse_args()

    index = DictionaryIndex.from_file(args.words)
    try:
        puzzle = create_puzzle(index, args.length, args.min_length, rng=random.Random(args.seed))
    except (ValueError, LookupError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    print(_status(puzzle))
    while not is_complete(puzzle):
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            break
        if line == "?":
            print(_status(puzzle))
            continue
        if line == "!":
            print("Answers: " + ", ".join(remaining(puzzle)))
            break
        if guess(puzzle, line):
            print(f"  + {line.lower()}  {_status(puzzle)}")
        elif line.strip().lower() == puzzle.original:
            print("  that's the whole word; find the smaller ones")
        else:
            print("  -")

    if is_complete(puzzle):
        print(f"Solved all! The word was {puzzle.original.upper()}.")
    else:
        print(f"The word was {puzzle.original.upper()}.")


if __name__ == "__main__":
    main()

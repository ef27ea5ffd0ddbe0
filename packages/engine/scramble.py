"""
Letter scrambling.

scramble(word) returns a random permutation of the word's letters that is
guaranteed to differ from the input whenever a different permutation exists.

Algorithm (rejection sampling):
  - shuffle the letters, retry until the result differs from the input.
  - a word made of a single repeated letter ("aaa") has no other
    permutation, so it is returned unchanged instead of looping forever.
  - for every other word of length >= 2 at least two distinct permutations
    exist, so each draw succeeds with probability >= 1/2 and the loop ends
    after at most ~2 draws in expectation.
"""

from __future__ import annotations

import random
from typing import Optional


def scramble(word: Optional[str], rng: random.Random | None = None) -> Optional[str]:
    """
    Return a shuffled copy of `word`.

    Args:
      word : input word; None or anything shorter than 2 is returned as-is
      rng  : random source (a fresh random.Random() when omitted)

    Examples:
      scramble("elephant") -> e.g. "aeehlnpt"
      scramble("aaa")      -> "aaa"
    """
    if word is None or len(word) < 2:
        return word

    # Only one distinct letter: no permutation can differ from the input.
    if len(set(word)) == 1:
        return word

    rng = rng or random.Random()
    letters = list(word)
    while True:
        rng.shuffle(letters)
        scrambled = "".join(letters)
        if scrambled != word:
            return scrambled

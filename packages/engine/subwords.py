"""
Sub-word generation.

Given a seed word, find every dictionary word that can be spelled with a
subset of its letters (each letter position used at most once, any order).

Algorithm (recursive descent over arrangements):
  - `current` is the arrangement built so far, `remaining` the unused letters.
  - At every step, `current` is kept if it is long enough, is a dictionary
    word and is not the seed itself.
  - Then each unused letter is appended in turn and we recurse.

Worst case this visits every permutation of every subset, O(n!) for an
n-letter seed. Two cuts keep it practical without changing the result:
  - prefix pruning: stop as soon as `current` is not the start of any word
  - sibling dedupe: a repeated letter in `remaining` yields the same
    branches, so each distinct letter is tried once per level
Seeds longer than `max_length` are rejected outright (ValueError) rather
than silently truncated.
"""

from __future__ import annotations

from typing import Optional, Set

from packages.lexicon import DictionaryIndex

DEFAULT_MIN_LENGTH = 3

# Upper bound on seed length for a single call; callers may pass
# max_length=None to lift it explicitly.
MAX_SEED_LENGTH = 10


def _collect(index: DictionaryIndex, remaining: str, current: str, seed: str,
             min_length: int, out: Set[str]) -> None:
    if not index.is_prefix(current):
        return

    if len(current) >= min_length and current != seed and index.is_word(current):
        out.add(current)

    tried = set()
    for i, ch in enumerate(remaining):
        if ch in tried:
            continue
        tried.add(ch)
        _collect(index, remaining[:i] + remaining[i + 1:], current + ch, seed, min_length, out)


def generate_sub_words(
        index: DictionaryIndex,
        word: Optional[str],
        min_length: Optional[int] = None,
        *,
        max_length: Optional[int] = MAX_SEED_LENGTH,
) -> Set[str]:
    """
    Return every dictionary word buildable from the letters of `word`.

    Args:
      index      : dictionary to validate candidates against
      word       : seed word (trimmed and lowercased before use)
      min_length : shortest sub-word kept (default 3); a value <= 0 yields
                   an empty set
      max_length : longest seed accepted; None disables the guard

    Returns:
      Set of sub-words. The seed itself is never included.

    Raises:
      ValueError if the seed is longer than `max_length`.

    Example:
      generate_sub_words(index, "yellow", 3)
        -> {low, lowly, lye, ole, owe, owl, well, welly, woe, yell, yeow, yew, yowl}
    """
    if word is None:
        return set()
    if min_length is None:
        min_length = DEFAULT_MIN_LENGTH
    elif min_length <= 0:
        return set()

    seed = word.strip().lower()
    if min_length > len(seed):
        return set()
    if max_length is not None and len(seed) > max_length:
        raise ValueError(f"Invalid word=[{seed}], length {len(seed)} exceeds max_length={max_length}")

    out: Set[str] = set()
    _collect(index, seed, "", seed, min_length, out)
    out.discard(seed)
    return out

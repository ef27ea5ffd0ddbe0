"""
Puzzle assembly.

create_puzzle picks a random seed word of the requested length, scrambles
it and lists every sub-word the player can discover. It either returns a
complete Puzzle or raises; there is no partial result.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from packages.lexicon import DictionaryIndex
from .scramble import scramble
from .search import pick_random_word
from .subwords import DEFAULT_MIN_LENGTH, MAX_SEED_LENGTH, generate_sub_words

MIN_PUZZLE_LENGTH = 3


class NoWordFoundError(LookupError):
    """The dictionary has no word of the requested length."""


@dataclass(frozen=True)
class Puzzle:
    """
    One playable puzzle.

    Notes
    -----
    - Frozen: `original` and `scrambled` never change after assembly.
    - `sub_words` maps each discoverable answer to its solved flag, in
      lexicographic order. The flags are the only mutable part and belong
      to the game session (see `engine.session`).
    """

    original: str
    scrambled: str
    sub_words: Dict[str, bool] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict:
        return {
            "original": self.original,
            "scrambled": self.scrambled,
            "sub_words": dict(self.sub_words),
        }


def _check_args(length: Optional[int], min_length: int, max_seed_length: Optional[int]) -> None:
    if length is None:
        raise ValueError("length must not be None")
    if min_length <= 0:
        raise ValueError(f"Invalid minLength=[{min_length}], expect positive integer")
    if length < MIN_PUZZLE_LENGTH:
        raise ValueError(f"Invalid length=[{length}], expect >= {MIN_PUZZLE_LENGTH}")
    if min_length > length:
        raise ValueError(f"Invalid minLength=[{min_length}], expect <= length=[{length}]")
    if max_seed_length is not None and length > max_seed_length:
        raise ValueError(f"Invalid length=[{length}], expect <= max_seed_length=[{max_seed_length}]")


def create_puzzle(
        index: DictionaryIndex,
        length: int,
        min_length: Optional[int] = None,
        *,
        rng: random.Random | None = None,
        max_seed_length: Optional[int] = MAX_SEED_LENGTH,
) -> Puzzle:
    """
    Assemble a Puzzle from a random word of `length` letters.

    Args:
      index           : dictionary to draw from
      length          : seed word length, >= 3
      min_length      : shortest sub-word (default 3), 1 <= min_length <= length
      rng             : random source for the pick and the scramble
      max_seed_length : longest seed allowed (None = no limit); also forwarded
                        to generate_sub_words as its length guard

    Raises:
      ValueError       on invalid arguments (checked before any work)
      NoWordFoundError when no word of `length` exists
    """
    if min_length is None:
        min_length = DEFAULT_MIN_LENGTH
    _check_args(length, min_length, max_seed_length)

    rng = rng or random.Random()
    original = pick_random_word(index, length, rng=rng)
    if original is None:
        raise NoWordFoundError(f"Cannot find a word of length=[{length}] to create a puzzle")

    scrambled = scramble(original, rng=rng)
    found = generate_sub_words(index, original, min_length, max_length=max_seed_length)
    sub_words = {w: False for w in sorted(found)}
    return Puzzle(original=original, scrambled=scrambled, sub_words=sub_words)

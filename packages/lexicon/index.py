"""
Read-only dictionary index.

Built exactly once from the ordered word sequence supplied by a word list
(see `lexicon.io.read_words`) and shared by every engine operation:

  - membership : set of words, O(1) lookups
  - ordered    : the original sequence (duplicates kept) for linear scans
                 and uniform random sampling
  - by_length  : length -> words of that length, in dictionary order
  - prefixes   : every prefix of every word, used to prune sub-word search

Nothing is mutated after __init__, so one instance can be shared by
concurrent readers without locking.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

import numpy as np

from .io import read_words

# Characters that can never start/end a search (digits and punctuation).
INVALID_SEARCH_CHARS: FrozenSet[str] = frozenset(",./<>?;':\"[]{}\\|1234567890!@#$%^&*()`~")


class DictionaryIndex:
    """Immutable lookup structures over a fixed word list."""

    __slots__ = ("_ordered", "_membership", "_by_length", "_prefixes")

    def __init__(self, words: Iterable[str]):
        ordered: Tuple[str, ...] = tuple(words)
        by_length: Dict[int, list] = {}
        prefixes = set()
        for w in ordered:
            by_length.setdefault(len(w), []).append(w)
            for i in range(len(w) + 1):
                prefixes.add(w[:i])

        self._ordered = ordered
        self._membership: FrozenSet[str] = frozenset(ordered)
        self._by_length: Dict[int, Tuple[str, ...]] = {n: tuple(ws) for n, ws in by_length.items()}
        self._prefixes: FrozenSet[str] = frozenset(prefixes)

    @classmethod
    def from_file(cls, path: Path | str) -> "DictionaryIndex":
        """Build an index from a one-word-per-line text file."""
        return cls(read_words(path))

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def contains(self, word: Optional[str]) -> bool:
        """Case-insensitive, whitespace-trimmed membership test."""
        if not word:
            return False
        return word.strip().lower() in self._membership

    def is_word(self, candidate: str) -> bool:
        """Exact (already normalized) membership; the hot path for sub-word search."""
        return candidate in self._membership

    def is_prefix(self, candidate: str) -> bool:
        """True if some dictionary word starts with `candidate`."""
        return candidate in self._prefixes

    def words_of_length(self, n: int) -> Tuple[str, ...]:
        return self._by_length.get(n, ())

    def all_words(self) -> Tuple[str, ...]:
        return self._ordered

    def length_histogram(self) -> np.ndarray:
        """
        Word counts by length: hist[n] == number of entries of length n.
        Duplicates in the source are counted, matching `all_words()`.
        """
        if not self._ordered:
            return np.zeros(1, dtype=np.int64)
        lengths = np.fromiter((len(w) for w in self._ordered), dtype=np.int64, count=len(self._ordered))
        return np.bincount(lengths)

    @staticmethod
    def is_valid_search_char(c: Optional[str]) -> bool:
        """
        A search key character is valid unless it is missing, not a single
        character, or one of INVALID_SEARCH_CHARS.
        """
        if not isinstance(c, str) or len(c) != 1:
            return False
        return c not in INVALID_SEARCH_CHARS

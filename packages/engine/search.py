"""
Attribute queries over a DictionaryIndex.

All queries are read-only, case-insensitive and trim their inputs.
An invalid search key is not an error: it simply matches nothing.
"""

from __future__ import annotations

import random
from typing import List, Optional, Set

from packages.lexicon import DictionaryIndex


def exists(index: DictionaryIndex, word: Optional[str]) -> bool:
    """True if `word` is in the dictionary (case-insensitive, trimmed)."""
    return index.contains(word)


def is_palindrome(word: str) -> bool:
    w = word.lower()
    return w == w[::-1]


def palindromes(index: DictionaryIndex) -> Set[str]:
    """
    Every dictionary word of length > 1 that reads the same reversed.
    Single letters are never palindromes here ("a" is excluded).
    """
    return {w for w in index.all_words() if len(w) > 1 and is_palindrome(w)}


def by_prefix(index: DictionaryIndex, prefix: Optional[str]) -> List[str]:
    """
    Words starting with `prefix`, in dictionary order.

    Empty result when the prefix is None, blank, or starts with a digit or
    punctuation character.
    """
    if prefix is None:
        return []
    cleaned = prefix.strip().lower()
    if not cleaned or not index.is_valid_search_char(cleaned[0]):
        return []
    return [w for w in index.all_words() if w.lower().startswith(cleaned)]


def _char_matches(c: Optional[str], letter: str) -> bool:
    if c is None:
        return True
    return DictionaryIndex.is_valid_search_char(c) and c.lower() == letter


def by_search(
        index: DictionaryIndex,
        start_char: Optional[str] = None,
        end_char: Optional[str] = None,
        length: Optional[int] = None,
) -> List[str]:
    """
    Words matching every criterion that was supplied, in dictionary order.

    Args:
      start_char : required first letter (case-insensitive)
      end_char   : required last letter (case-insensitive)
      length     : exact word length; must be >= 1 to match anything

    Absent criteria always match. With all three absent the result is empty.
    An invalid character (digit/punctuation) or a non-positive length never
    matches, so it yields an empty result rather than an error.
    """
    if start_char is None and end_char is None and length is None:
        return []

    out: List[str] = []
    for w in index.all_words():
        cleaned = w.strip().lower()
        if not cleaned:
            continue
        if not _char_matches(start_char, cleaned[0]):
            continue
        if not _char_matches(end_char, cleaned[-1]):
            continue
        if length is not None and not (length > 0 and len(cleaned) == length):
            continue
        out.append(w)
    return out


def pick_random_word(
        index: DictionaryIndex,
        length: Optional[int] = None,
        rng: random.Random | None = None,
) -> Optional[str]:
    """
    Pick one word uniformly at random.

    With `length` the pick is restricted to words of exactly that length.
    Returns None when no word qualifies.
    """
    pool = index.all_words() if length is None else index.words_of_length(length)
    if not pool:
        return None
    rng = rng or random.Random()
    return pool[rng.randrange(len(pool))]

"""
Game session helpers.

A Puzzle is frozen except for its solved flags; these helpers are the only
place that flips them. Guessing is forgiving: unknown or repeated guesses
return False instead of raising.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .puzzle import Puzzle


def guess(puzzle: Puzzle, word: Optional[str]) -> bool:
    """
    Mark `word` as solved if it is an unsolved sub-word of the puzzle.

    Returns True only when the guess newly solved a sub-word.
    """
    attempt = (word or "").strip().lower()
    if puzzle.sub_words.get(attempt) is False:
        puzzle.sub_words[attempt] = True
        return True
    return False


def remaining(puzzle: Puzzle) -> List[str]:
    """Unsolved sub-words, in puzzle order."""
    return [w for w, solved in puzzle.sub_words.items() if not solved]


def progress(puzzle: Puzzle) -> Tuple[int, int]:
    """(solved, total) counts."""
    solved = sum(1 for s in puzzle.sub_words.values() if s)
    return solved, len(puzzle.sub_words)


def is_complete(puzzle: Puzzle) -> bool:
    return all(puzzle.sub_words.values())

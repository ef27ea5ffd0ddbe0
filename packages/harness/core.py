"""
Batch puzzle generation primitives.

- run_case:  build one puzzle with a seeded RNG and time it.
- run_batch: build many puzzles in sequence with per-case seeds.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, List

from packages.engine import create_puzzle, MAX_SEED_LENGTH
from packages.lexicon import DictionaryIndex


def run_case(
        index: DictionaryIndex,
        *,
        length: int,
        min_length: int | None = None,
        seed: int | None = None,
        max_seed_length: int | None = MAX_SEED_LENGTH,
) -> Dict:
    """
    Assemble one puzzle.

    Args:
        index:      dictionary to draw from
        length:     seed word length
        min_length: shortest sub-word (default 3)
        seed:       RNG seed to make the pick and the scramble reproducible
        max_seed_length: sub-word generation guard (None = no limit)

    Returns:
        dict with keys:
            original, scrambled, sub_words (sorted list), num_sub_words, time_ms
    """
    rng = random.Random(seed)

    t0 = time.perf_counter_ns()
    puzzle = create_puzzle(index, length, min_length, rng=rng, max_seed_length=max_seed_length)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "original": puzzle.original,
        "scrambled": puzzle.scrambled,
        "sub_words": list(puzzle.sub_words),
        "num_sub_words": len(puzzle.sub_words),
        "time_ms": dt,
    }


def run_batch(
        index: DictionaryIndex,
        *,
        length: int,
        min_length: int | None = None,
        count: int = 1,
        seed: int | None = None,
        max_seed_length: int | None = MAX_SEED_LENGTH,
        on_case: Callable[[int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Build `count` puzzles back-to-back.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).

    `on_case(idx, result)` is called after each puzzle (1-based idx), e.g. to
    drive a progress display.
    """
    if count < 0:
        raise ValueError(f"Invalid count=[{count}], expect >= 0")

    out: List[Dict] = []
    for idx in range(1, count + 1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(index, length=length, min_length=min_length, seed=case_seed,
                     max_seed_length=max_seed_length)
        out.append(r)
        if on_case is not None:
            on_case(idx, r)
    return out

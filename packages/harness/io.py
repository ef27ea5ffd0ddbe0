"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-puzzle results into a tidy CSV (one row per puzzle).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["original", "scrambled", "num_sub_words", "time_ms", "sub_words"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of puzzles to CSV.

    Schema (columns):
      original, scrambled, num_sub_words, time_ms, sub_words

    `sub_words` is a single space-separated cell so rows stay one per puzzle.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "original": r["original"],
                "scrambled": r["scrambled"],
                "num_sub_words": r["num_sub_words"],
                "time_ms": round(float(r["time_ms"]), 3),
                "sub_words": " ".join(r.get("sub_words", [])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, length, min_length, count, seed, outdir)
      - wordlist: output of lexicon.validate_wordlist(...)
      - num_puzzles: number of puzzles in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

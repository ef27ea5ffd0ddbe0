"""
Word-list validator.

What this module does:
- Validate a dictionary file (one word per line) before building an index.
- Enforce formatting rules (lowercase, a–z only, one per line, minimum length).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Summarize word lengths as a histogram (the puzzle generator picks seed
  words by length, so an empty bucket means that puzzle size is unavailable).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.lexicon import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/lexicon/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

import numpy as np


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word-list file."""
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    count: int            # number of VALID words after cleaning
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int     # unique valid words
    invalid_lines: int    # number of invalid lines encountered
    length_histogram: List[int] = field(default_factory=list)  # hist[n] = words of length n
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_ascii_lower(w: str) -> bool:
    return w.isascii() and w.isalpha() and w == w.lower()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line (surrounding whitespace ignored)
      - must be lowercase a–z
      - must be at least `min_length` long
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and _is_ascii_lower(w) and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _histogram(words: List[str]) -> List[int]:
    if not words:
        return []
    return np.bincount(np.array([len(w) for w in words], dtype=np.int64)).tolist()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = 1) -> Dict:
    """
    Validate a dictionary word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    min_length : int
        Shortest acceptable word; shorter lines count as invalid.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema).
        `passed` is strict on content (exists, non-empty, no invalid lines)
        but tolerant of duplicates, which only add an issue line.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path=path, exists=False, count=0, sha256="", unique_count=0,
                             invalid_lines=0, passed=False,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        length_histogram=_histogram(words),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=370105 (uniq=370105, sha=abc123...) | invalid=0 | longest=31 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    hist = report.get("length_histogram") or []
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | longest={max(len(hist) - 1, 0)} | {status}"
    )

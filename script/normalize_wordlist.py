"""
Clean a dictionary file in place (or into --out).

Features:
- Strips whitespace and lowercases every line.
- Drops blank lines and, with --letters-only, anything that is not a–z.
- Removes duplicate words, preserving original order (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.

Usage:
    python -m script.normalize_wordlist --in packages/lexicon/data/words.txt --letters-only
"""

import argparse
from pathlib import Path

from packages.lexicon.io import write_lines


def read_lines(p: Path) -> list[str]:
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def normalize(lines: list[str], letters_only: bool = False) -> list[str]:
    words = [s.strip().lower() for s in lines if s.strip()]
    if letters_only:
        words = [w for w in words if w.isascii() and w.isalpha()]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--letters-only", action="store_true", help="drop words with non a–z characters")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp
    if not inp.exists():
        raise FileNotFoundError(inp)

    lines = read_lines(inp)
    out = normalize(lines, letters_only=args.letters_only)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")

if __name__ == "__main__":
    main()

# apps/cli/run.py
"""
CLI entry point for batch puzzle generation.

This script:
  1) Validates the word list (prints counts + SHA + length histogram summary).
  2) Builds the dictionary index.
  3) Generates a batch of puzzles with a live progress indicator and writes:
       - CSV:  one row per puzzle (original, scrambled, sub-words)
       - JSON: manifest with config, word-list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.lexicon import DictionaryIndex, validate_wordlist, pretty_summary
from packages.harness import run_batch
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

DEFAULT_WORDS = "packages/lexicon/data/words.txt"


def main(argv=None):
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="jumble — generate puzzle batches")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="path to the dictionary (one word per line)")
    ap.add_argument("--length", type=int, default=6, help="seed word length (>= 3)")
    ap.add_argument("--min-length", type=int, default=3, help="shortest sub-word to keep")
    ap.add_argument("--count", type=int, default=10, help="number of puzzles to generate")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-seed-length", type=int, default=10,
                    help="refuse sub-word generation for longer seeds (0 = no limit)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Build the index once; every puzzle shares it read-only
    index = DictionaryIndex.from_file(args.words)
    max_seed_length = args.max_seed_length or None

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = args.count
    bar = tqdm(total=total, ncols=80, desc="Generating", unit="puzzle") if mode == "bar" else None

    start = time.time()
    last_print = 0.0

    def _progress(idx: int, _result: dict) -> None:
        nonlocal last_print
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    # 4) Generate with live progress (per-case seeds are seed + idx)
    results = run_batch(index, length=args.length, min_length=args.min_length, count=total,
                        seed=args.seed, max_seed_length=max_seed_length, on_case=_progress)

    if bar is not None:
        bar.close()
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"puzzles_{run_id}.csv"
    manifest_path = outdir / f"puzzles_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_puzzles": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

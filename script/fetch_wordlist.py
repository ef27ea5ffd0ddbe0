"""
Download a word list and write a clean dictionary file.

What it does:
- Downloads the URL (a plain-text list, or an HTML page listing words).
- HTML pages are reduced to their visible text with BeautifulSoup.
- Keeps whitespace-separated tokens made only of ASCII letters.
- Lowercases, de-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --out packages/lexicon/data/words.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --sort --out packages/lexicon/data/words.txt
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"^[A-Za-z]+$")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, is_html: bool = False) -> list[str]:
    if is_html:
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    words = [tok.lower() for tok in text.split() if WORD_RE.match(tok)]
    return unique_preserve_order(words)


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    is_html = "html" in r.headers.get("Content-Type", "")
    return extract_words(r.text, is_html=is_html)


def main():
    ap = argparse.ArgumentParser(description="Download a dictionary word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/lexicon/data/words.txt")
    ap.add_argument("--min-length", type=int, default=1, help="drop shorter words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = [w for w in fetch_words(args.url) if len(w) >= args.min_length]
    if args.sort:
        words = sorted(words)

    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()

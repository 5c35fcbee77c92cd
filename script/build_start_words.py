"""
Build the root word list (start.txt) from a local file or a web page.

What it does:
- Reads a local text file, or downloads a page (plain text or HTML).
- For HTML, keeps only the visible text.
- Extracts lowercase alphabetic words of exactly --length letters.
- De-duplicates while preserving first-seen order, and writes one word per line.

Usage:
    python -m script.build_start_words --in /usr/share/dict/words \
        --out packages/datasets/data/start.txt
    # or from a page, alphabetically sorted:
    python -m script.build_start_words --url https://example.org/words.html --sort
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets.io import write_lines

# Runs of letters in any script, so "débutantes" stays one token
WORD_RE = re.compile(r"[^\W\d_]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_text(url: str) -> str:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        return BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    return r.text


def extract_words(text: str, length: int) -> list[str]:
    """
    Pull whole alphabetic tokens of exactly `length` letters out of `text`.
    Tokens starting with a capital are skipped (proper nouns in dict files),
    and so are tokens with non-ASCII letters: the game only knows a-z.
    """
    words = [m.group(0) for m in WORD_RE.finditer(text)]
    return unique_preserve_order(
        w for w in words if len(w) == length and w.isascii() and w.islower()
    )


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build the root word list for Word Scramble")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="local text file to read")
    src.add_argument("--url", help="page to download (text or HTML)")
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    ap.add_argument("--length", type=int, default=8, help="exact root word length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args(argv)

    if args.inp:
        inp = Path(args.inp)
        if not inp.exists():
            raise FileNotFoundError(inp)
        text = inp.read_text(encoding="utf-8")
    else:
        text = fetch_text(args.url)

    words = extract_words(text, args.length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique {args.length}-letter words -> {args.out}")


if __name__ == "__main__":
    main()

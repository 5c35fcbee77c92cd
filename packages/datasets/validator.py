"""
Word list validator for the start (root word) list.

What this module does:
- Validate a root word list such as data/start.txt.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters,
  one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/start.txt")
    print(pretty_summary(rep))

Note: validation is a report, not a gate. `load_word_list` is what the game
uses at startup; it is more lenient (it lowercases and trims for you).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.validation import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable root word
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


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


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            if wl == w and wl.isalpha() and wl.isascii() and len(wl) >= min_length:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a root word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    min_length : int
        Shortest acceptable word. A root shorter than the minimum candidate
        length could never yield a playable round.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema) with
        counts, SHA-256, duplicate/invalid diagnostics, a strict `passed`
        flag (non-empty, no invalid lines, no duplicates) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordListReport(path, False, min_length, 0, "", 0, 0, False, issues)
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p, min_length)
    except (OSError, UnicodeDecodeError) as e:
        issues.append(f"word list unreadable: {e}")
        rep = WordListReport(str(p), True, min_length, 0, "", 0, 0, False, issues)
        return asdict(rep)

    unique_count = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique_count != len(words):
        issues.append("word list contains duplicate lines")

    passed = bool(words) and invalid == 0 and unique_count == len(words)

    rep = WordListReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique_count,
        invalid_lines=invalid,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=120 (uniq=120, sha=abc123...) | min_length=3 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    name = Path(report["path"]).name
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| min_length={report['min_length']} | {status}"
    )

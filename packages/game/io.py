"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:     flatten per-submission outcomes into a tidy CSV (one row per input).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Raw inputs are written verbatim (surrounding spaces included) so a CSV row
  shows exactly what was typed; `word` holds the normalized form.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["run_id", "step", "root_word", "input", "word", "accepted", "reason", "title",
          "used_count"]


def write_csv(records: List[Dict], path: str, run_id: str) -> str:
    """
    Serialize replay records to CSV.

    Schema (columns):
      run_id, step, root_word, input, word, accepted, reason, title, used_count

    Args:
      records: list of dicts produced by the replay loop, one per submission.
      path   : output CSV path.
      run_id : stamped on every row so CSVs from several runs can be concatenated.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for step, r in enumerate(records, start=1):
            w.writerow({
                "run_id": run_id,
                "step": step,
                "root_word": r["root_word"],
                "input": r["input"],
                "word": r["word"],
                "accepted": r["accepted"],
                "reason": r.get("reason") or "",
                "title": r.get("title") or "",
                "used_count": r["used_count"],
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, dictionary, seed, transcript, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_submissions, num_accepted, rounds
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

"""
Transcript replay: feed a sequence of raw inputs through a controller.

Transcript format (one entry per line):
  - any text          -> submitted as-is (surrounding spaces are part of the input)
  - ":restart"        -> start a new round (any case)
  - "# ..." or blank  -> ignored
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .core import SessionController

RESTART_COMMAND = ":restart"


def iter_transcript(lines: Iterable[str]) -> Iterator[str]:
    """Yield the meaningful entries of a transcript (commands and submissions)."""
    for line in lines:
        entry = line.rstrip("\r\n")
        if not entry.strip() or entry.lstrip().startswith("#"):
            continue
        yield entry


def is_restart(entry: str) -> bool:
    """Commands are normalized like candidates: trimmed and case-insensitive."""
    return entry.strip().lower() == RESTART_COMMAND


def replay_entry(controller: SessionController, entry: str) -> Dict | None:
    """
    Apply one transcript entry. Returns a record for submissions and None
    for a restart.
    """
    if is_restart(entry):
        controller.restart()
        return None

    root = controller.root_word
    res = controller.submit(entry)
    v = res.verdict
    return {
        "root_word": root,
        "input": entry,
        "word": v.word,
        "accepted": v.accepted,
        "reason": v.reason.value if v.reason else None,
        "title": v.title,
        "used_count": len(controller.used_words),
    }


def replay(controller: SessionController, lines: Iterable[str]) -> List[Dict]:
    """Replay a whole transcript and collect one record per submission."""
    records: List[Dict] = []
    for entry in iter_transcript(lines):
        rec = replay_entry(controller, entry)
        if rec is not None:
            records.append(rec)
    return records

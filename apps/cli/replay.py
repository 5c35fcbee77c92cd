# apps/cli/replay.py
"""
Replay a transcript of submissions and write a report.

This script:
  1) Loads the root word list, then prints its report (counts + SHA).
  2) Builds the dictionary backend and a seeded controller.
  3) Replays the transcript with a live progress indicator and writes:
       - CSV:  one row per submission (root word, input, verdict)
       - JSON: manifest with config, word list report, git commit, totals
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from packages.datasets import DEFAULT_WORD_LIST, WordListError, load_word_list, pretty_summary, \
    read_lines, validate_wordlist
from packages.dictionary import DictionaryError, create_dictionary, get_dictionary_ids
from packages.dictionary.frequency import DEFAULT_MIN_ZIPF
from packages.game import SessionController
from packages.game.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from packages.game.replay import is_restart, iter_transcript, replay_entry


def _dictionary_options(args: argparse.Namespace) -> dict:
    if args.dictionary == "wordlist":
        return {"path": args.dict_file}
    if args.dictionary == "wordfreq":
        return {"min_zipf": args.min_zipf}
    return {}


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Word Scramble — replay a transcript of submissions")
    ap.add_argument("transcript", help="text file, one submission (or :restart) per line")
    ap.add_argument("--words", default=str(DEFAULT_WORD_LIST), help="root word list (one per line)")
    ap.add_argument("--dictionary", default="wordfreq",
                    help=f"dictionary backend (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--dict-file", help="word file for the 'wordlist' backend")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="minimum Zipf frequency for the 'wordfreq' backend")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducible root words)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show replay progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: List[str] | None = None) -> Dict[str, str]:
    """
    Parse CLI args, replay the transcript with progress, and write outputs.
    Returns the paths written ({"csv": ..., "manifest": ...}).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Load the word list (startup errors surface here), then report on it
    try:
        words = load_word_list(args.words)
        dictionary = create_dictionary(args.dictionary, **_dictionary_options(args))
        entries = list(iter_transcript(read_lines(args.transcript)))
    except FileNotFoundError as e:
        raise SystemExit(f"error: transcript not found: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"error: cannot read transcript: {e}") from e
    except (WordListError, DictionaryError, ValueError) as e:
        raise SystemExit(f"error: {e}") from e

    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Seeded controller so the same transcript always meets the same roots
    controller = SessionController(words, dictionary, seed=args.seed)
    rounds = 1

    mode = _progress_mode(args.progress)
    iterator = tqdm(entries, ncols=80, desc="Replaying", unit="entry") if mode == "bar" else entries

    records: List[Dict] = []
    total = len(entries)
    start = time.time()
    last_print = 0.0

    # 3) Replay with live progress
    for idx, entry in enumerate(iterator, 1):
        if is_restart(entry):
            rounds += 1
        rec = replay_entry(controller, entry)
        if rec is not None:
            records.append(rec)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(records, str(csv_path), run_id=run_id)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "dictionary_id": dictionary.id,
        "rounds": rounds,
        "num_submissions": len(records),
        "num_accepted": sum(1 for r in records if r["accepted"]),
        "final_state": controller.snapshot(),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return {"csv": str(csv_path), "manifest": str(manifest_path)}


if __name__ == "__main__":
    main()

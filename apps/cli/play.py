# apps/cli/play.py
"""
Interactive terminal front end for Word Scramble.

This script:
  1) Loads the root word list (fails fast if it can't be read).
  2) Builds the requested dictionary backend.
  3) Runs rounds: shows the root word, reads words, prints each verdict.

Commands typed at the prompt:
  :restart  new root word, empty list
  :quit     leave (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import DEFAULT_WORD_LIST, WordListError, load_word_list
from packages.dictionary import DictionaryError, create_dictionary, get_dictionary_ids
from packages.dictionary.frequency import DEFAULT_MIN_ZIPF
from packages.engine import letter_counts
from packages.game import SessionController
from packages.game.replay import RESTART_COMMAND

QUIT_COMMAND = ":quit"


def _dictionary_options(args: argparse.Namespace) -> dict:
    """Map CLI flags onto the chosen backend's constructor arguments."""
    if args.dictionary == "wordlist":
        return {"path": args.dict_file}
    if args.dictionary == "wordfreq":
        return {"min_zipf": args.min_zipf}
    return {}


def _render_round(controller: SessionController) -> str:
    root = controller.root_word
    letters = " ".join(f"{ch}x{n}" if n > 1 else ch for ch, n in letter_counts(root).items())
    return f"\n=== {root.upper()} ===  letters: {letters}"


def _render_words(controller: SessionController) -> str:
    # Letter count next to each word, most recent first
    return "\n".join(f"  ({len(w)}) {w}" for w in controller.used_words)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Word Scramble — make words from the root word's letters")
    ap.add_argument("--words", default=str(DEFAULT_WORD_LIST), help="root word list (one per line)")
    ap.add_argument("--dictionary", default="wordfreq",
                    help=f"dictionary backend (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--dict-file", help="word file for the 'wordlist' backend")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="minimum Zipf frequency for the 'wordfreq' backend")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible root words")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: list[str] | None = None) -> None:
    """
    Parse CLI args, set up the controller, and run the read-eval loop.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        words = load_word_list(args.words)
        dictionary = create_dictionary(args.dictionary, **_dictionary_options(args))
    except (WordListError, DictionaryError, ValueError) as e:
        raise SystemExit(f"error: {e}") from e

    controller = SessionController(words, dictionary, seed=args.seed)
    print(_render_round(controller))

    while True:
        try:
            raw = input("> ")
        except EOFError:
            print()
            break

        command = raw.strip().lower()
        if command == QUIT_COMMAND:
            break
        if command == RESTART_COMMAND:
            controller.restart()
            print(_render_round(controller))
            continue

        res = controller.submit(raw)
        if res.accepted:
            print(_render_words(controller))
        else:
            v = res.verdict
            sys.stdout.write(f"[{v.title}] {v.message}\n")

    print(f"Found {len(controller.used_words)} word(s) from {controller.root_word}.")


if __name__ == "__main__":
    main()

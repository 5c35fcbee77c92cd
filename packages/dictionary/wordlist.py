"""
Word-list dictionary: every line of a plain text file is a known word.

Typical sources: /usr/share/dict/words, TWL06, SOWPODS. Blank lines are
ignored, entries are lowercased. Entries containing non-letters (e.g.
"o'clock") are kept verbatim; they simply never match a candidate that
doesn't contain the same characters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .base import BaseDictionary, DictionaryError, register

logger = logging.getLogger(__name__)


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list file"

    def __init__(self, path: Union[str, Path, None] = None, **kwargs):
        super().__init__(**kwargs)
        if path is None:
            raise DictionaryError("wordlist dictionary needs a path (--dict-file)")
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except OSError as e:
            raise DictionaryError(f"cannot read dictionary file {p}: {e}") from e

        self.path = str(p)
        self.words = frozenset(
            w.strip().lower() for w in text.splitlines() if w.strip()
        )
        logger.info("Loaded %s dictionary words from %s", f"{len(self.words):,}", p)

    def is_recognized(self, word: str) -> bool:
        return word.strip().lower() in self.words

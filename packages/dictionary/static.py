"""
Static dictionary: a fixed, in-memory set of words.

Useful for tests and small demos where a real dictionary would be overkill.
Words are compared lowercase.
"""

from __future__ import annotations

from typing import Iterable, Optional
from .base import BaseDictionary, register


@register
class StaticDictionary(BaseDictionary):
    id = "static"
    name = "Static word set"

    def __init__(self, words: Optional[Iterable[str]] = None, **kwargs):
        super().__init__(**kwargs)
        self.words = frozenset(w.strip().lower() for w in (words or ()) if w.strip())

    def is_recognized(self, word: str) -> bool:
        return word.strip().lower() in self.words

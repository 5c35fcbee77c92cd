"""
Frequency-based dictionary backed by the `wordfreq` package.

Idea:
  - wordfreq knows how often a token shows up in a large multi-source corpus,
    on the Zipf scale (0 = never seen, ~7 = "the").
  - We call a word "recognized" when its Zipf frequency in the configured
    language is at least `min_zipf`.

Notes:
  - The default threshold (2.0) keeps ordinary but uncommon words like
    "silkworm" and drops most keyboard mash. Raise it for an easier game.
  - wordfreq raises on unsupported languages; we fail early in __init__
    rather than on the first lookup.
"""

from __future__ import annotations

from wordfreq import available_languages, zipf_frequency

from .base import BaseDictionary, DictionaryError, register

DEFAULT_MIN_ZIPF = 2.0


@register
class WordFreqDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq (Zipf threshold)"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF, **kwargs):
        super().__init__(**kwargs)
        if self.language not in available_languages():
            raise DictionaryError(f"wordfreq has no data for language {self.language!r}")
        self.min_zipf = float(min_zipf)

    def is_recognized(self, word: str) -> bool:
        w = word.strip().lower()
        # wordfreq tokenizes; multi-token input ("ice cream") is not one word
        if not w.isalpha():
            return False
        return zipf_frequency(w, self.language) >= self.min_zipf

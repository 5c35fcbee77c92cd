from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Session:
    """One round of play: the root word and the words accepted so far."""
    root_word: str
    used_words: List[str] = field(default_factory=list)  # most recent first

    def snapshot(self) -> dict:
        """Plain-dict copy, safe to serialize or compare in tests."""
        return {"root_word": self.root_word, "used_words": list(self.used_words)}

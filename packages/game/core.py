"""
Round controller primitives.

- SessionController.restart: draw a fresh root word and empty the used list.
- SessionController.submit:  validate one raw input and, if accepted, record it.
- FALLBACK_ROOT_WORD is used when the word list is empty.

The controller owns the one Session for its lifetime; front ends (terminal,
replay, tests) hold a controller and never touch module-level state. These
classes are UI-agnostic so they can be reused by a CLI app, a notebook, or a
future service without changes.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from packages.dictionary import BaseDictionary
from packages.engine import Session, Verdict, validate

logger = logging.getLogger(__name__)

FALLBACK_ROOT_WORD = "silkworm"


@dataclass(frozen=True)
class SubmitResult:
    """What the front end should do after a submission."""
    verdict: Verdict
    clear_input: bool  # True only when the word was accepted

    @property
    def accepted(self) -> bool:
        return self.verdict.accepted


class SessionController:
    """
    Owns a Session and exposes the two operations that change it.

    Args:
        words:      root word candidates (loaded once; kept as an immutable tuple)
        dictionary: lookup used by the validator
        seed:       RNG seed for reproducible root word draws
        rng:        ready-made random.Random (takes precedence over `seed`)
    """

    def __init__(
            self,
            words: Iterable[str],
            dictionary: BaseDictionary,
            *,
            seed: int | None = None,
            rng: Optional[random.Random] = None,
    ):
        self.words = tuple(words)
        self.dictionary = dictionary
        self.rng = rng if rng is not None else random.Random(seed)
        self.restart()

    @property
    def root_word(self) -> str:
        return self.session.root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        """Read-only view; the round only changes through submit() and restart()."""
        return tuple(self.session.used_words)

    def restart(self) -> None:
        """Start a new round: uniform random root word (or the fallback), no used words."""
        root = self.rng.choice(self.words) if self.words else FALLBACK_ROOT_WORD
        self.session = Session(root_word=root)
        logger.info("new round, root word %r", root)

    def submit(self, raw_input: str) -> SubmitResult:
        """
        Validate `raw_input` against the current round.

        Accepted words are inserted at the front of `used_words` in their
        normalized form. Rejections leave the session untouched.
        """
        verdict = validate(raw_input, self.session, self.dictionary)
        if verdict.accepted:
            self.session.used_words.insert(0, verdict.word)
        return SubmitResult(verdict=verdict, clear_input=verdict.accepted)

    def snapshot(self) -> dict:
        return self.session.snapshot()

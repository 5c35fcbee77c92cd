"""
Candidate validation.

This module answers the question: "May this word be added to the round?"
A candidate is accepted iff, after normalization (lowercase, trimmed):
  - it differs from the root word
  - it has at least MIN_WORD_LENGTH letters
  - the dictionary recognizes it
  - it was not already accepted this round
  - it can be spelled with the root word's letters

The rules are checked in that order and the first failure is reported, so a
two-letter gibberish word is "too short", not "not recognized".

Rejections are ordinary return values (a Verdict), never exceptions: they are
expected, user-correctable outcomes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from packages.dictionary.base import BaseDictionary
from .letters import is_spellable
from .messages import RejectionReason, describe
from .state import Session

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one candidate."""
    word: str                                # normalized candidate
    reason: Optional[RejectionReason] = None  # None means accepted
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.reason is None


def normalize(raw: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return raw.strip().lower()


# Ordered (reason, passes) pairs. `passes` returns True when the word is fine
# with respect to that rule.
Rule = Tuple[RejectionReason, Callable[[str, Session, BaseDictionary], bool]]

RULES: List[Rule] = [
    (RejectionReason.SAME_AS_ROOT,
     lambda w, s, d: w != normalize(s.root_word)),
    (RejectionReason.TOO_SHORT,
     lambda w, s, d: len(w) >= MIN_WORD_LENGTH),
    (RejectionReason.NOT_RECOGNIZED,
     lambda w, s, d: d.is_recognized(w)),
    (RejectionReason.ALREADY_USED,
     lambda w, s, d: w not in s.used_words),
    (RejectionReason.NOT_SPELLABLE_FROM_ROOT,
     lambda w, s, d: is_spellable(w, normalize(s.root_word))),
]


def validate(candidate: str, session: Session, dictionary: BaseDictionary) -> Verdict:
    """
    Check `candidate` against every rule, in order, and stop at the first miss.

    Args:
      candidate  : raw player input (normalized here, once)
      session    : current round; read only, never mutated
      dictionary : anything with `is_recognized(word) -> bool`

    Returns:
      Verdict with `reason=None` on acceptance, otherwise the first failing
      reason plus the title/message to show the player.
    """
    word = normalize(candidate)

    for reason, passes in RULES:
        if not passes(word, session, dictionary):
            title, message = describe(reason, session.root_word)
            logger.debug("rejected %r (root=%r): %s", word, session.root_word, reason.value)
            return Verdict(word=word, reason=reason, title=title, message=message)

    logger.debug("accepted %r (root=%r)", word, session.root_word)
    return Verdict(word=word)

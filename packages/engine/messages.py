"""
Rejection reasons and the text shown to the player for each of them.

The order of `RejectionReason` members is the order in which the validator
checks the rules; the first failing rule wins.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class RejectionReason(str, Enum):
    SAME_AS_ROOT = "same_as_root"
    TOO_SHORT = "too_short"
    NOT_RECOGNIZED = "not_recognized"
    ALREADY_USED = "already_used"
    NOT_SPELLABLE_FROM_ROOT = "not_spellable_from_root"


# (title, message) per reason. `{root_word}` is filled in by `describe`.
MESSAGES: Dict[RejectionReason, Tuple[str, str]] = {
    RejectionReason.SAME_AS_ROOT: (
        "Nice try!",
        "The purpose of the game is to create different words with the letters of the one proposed.",
    ),
    RejectionReason.TOO_SHORT: (
        "Too short",
        "Words must contain at least 3 letters.",
    ),
    RejectionReason.NOT_RECOGNIZED: (
        "Not recognized",
        "You can't just make up new words, please refer to dictionaries.",
    ),
    RejectionReason.ALREADY_USED: (
        "Already used",
        "You already added this word, try another one!",
    ),
    RejectionReason.NOT_SPELLABLE_FROM_ROOT: (
        "Not possible",
        "You can't spell that word with the letters from {root_word}.",
    ),
}


def describe(reason: RejectionReason, root_word: str) -> Tuple[str, str]:
    """Return the (title, message) pair for `reason`, with the root word filled in."""
    title, message = MESSAGES[reason]
    return title, message.format(root_word=root_word)

"""
Letter consumption: can `word` be spelled with the letters of `root`?

Conventions:
  - each letter of the root may be used at most as many times as it appears
  - letter order in the root does not matter
  - comparison is exact on characters; callers normalize case beforehand

Algorithm (consume-as-you-go):
  1) Copy the root's characters into a mutable list.
  2) For each character of the word, in order, remove the first matching
     occurrence from the copy. If there is none left, the word cannot be
     spelled and we stop right there.

This is multiset containment: root "keep" allows "ee" but not "eee".
"""

from collections import Counter
from typing import Dict, List


def is_spellable(word: str, root: str) -> bool:
    """
    Return True if every letter of `word` can be taken from `root`
    without reusing any letter more often than `root` has it.

    Examples:
      is_spellable("ee", "keep")   -> True
      is_spellable("eee", "keep")  -> False
      is_spellable("silent", "listen") -> True
    """
    remaining: List[str] = list(root)

    for ch in word:
        try:
            # list.index finds the first match by position
            remaining.pop(remaining.index(ch))
        except ValueError:
            return False

    return True


def letter_counts(root: str) -> Dict[str, int]:
    """
    Multiplicity of each letter in `root`, in order of first appearance.
    Handy for showing the player which letters (and how many) are on offer.
    """
    return dict(Counter(root))

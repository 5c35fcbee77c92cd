from .letters import is_spellable, letter_counts
from .messages import RejectionReason, describe
from .state import Session
from .validation import Verdict, normalize, validate

__all__ = [
    "is_spellable", "letter_counts", "RejectionReason", "describe",
    "Session", "Verdict", "normalize", "validate",
]

from __future__ import annotations
from typing import Dict, Type

DEFAULT_LANGUAGE = "en"

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


class DictionaryError(RuntimeError):
    """A dictionary backend could not be set up (missing file, bad option)."""


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that backends inherit ----
class BaseDictionary:
    """
    The one capability the game needs from a dictionary: "is this a word?".
    Lookups use a single fixed language for the lifetime of the object.
    """
    id = "base"
    name = "Base"

    def __init__(self, *, language: str = DEFAULT_LANGUAGE):
        self.language = language

    def is_recognized(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

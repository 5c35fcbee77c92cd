from __future__ import annotations
from typing import List
from .base import BaseDictionary, DictionaryError, REGISTRY, register

from . import static  # noqa: F401
from . import wordlist  # noqa: F401
from . import frequency  # noqa: F401


def create_dictionary(dictionary_id: str, **options) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary backend by id.
    `options` are passed straight to the backend constructor.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())

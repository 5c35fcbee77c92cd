from .core import FALLBACK_ROOT_WORD, SessionController, SubmitResult
from .io import write_csv, write_manifest

__all__ = ["FALLBACK_ROOT_WORD", "SessionController", "SubmitResult", "write_csv", "write_manifest"]

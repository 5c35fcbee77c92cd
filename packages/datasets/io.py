from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)

# Bundled root word list
DEFAULT_WORD_LIST = Path(__file__).parent / "data" / "start.txt"


class WordListError(RuntimeError):
    """
    The start word list could not be loaded. This is a startup failure:
    the game never runs on a list it could not read.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot load word list {self.path}: {reason}")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_word_list(p: Path | str) -> Tuple[str, ...]:
    """
    Load the newline-separated root word list: lowercased, trimmed, blanks
    dropped, order kept.

    Raises WordListError if the file is missing or unreadable. An empty file
    is not an error (the game falls back to its default root word), but it is
    logged because it is almost always a packaging mistake.
    """
    try:
        lines = read_lines(p)
    except FileNotFoundError as e:
        raise WordListError(p, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(p, str(e)) from e

    words = tuple(w.strip().lower() for w in lines if w.strip())
    if words:
        logger.info("Loaded %d root words from %s", len(words), p)
    else:
        logger.warning("Word list %s is empty; the default root word will be used", p)
    return words

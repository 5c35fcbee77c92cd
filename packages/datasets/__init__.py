from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORD_LIST, WordListError, load_word_list, read_lines, write_lines

__all__ = [
    "validate_wordlist", "pretty_summary",
    "DEFAULT_WORD_LIST", "WordListError", "load_word_list", "read_lines", "write_lines",
]

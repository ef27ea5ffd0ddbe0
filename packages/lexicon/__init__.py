from .index import DictionaryIndex, INVALID_SEARCH_CHARS
from .io import read_words, write_lines
from .validator import validate_wordlist, pretty_summary

__all__ = ["DictionaryIndex", "INVALID_SEARCH_CHARS", "read_words", "write_lines",
           "validate_wordlist", "pretty_summary"]

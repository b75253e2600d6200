"""Report export helpers for typoguard."""

from .dictionary import (
    DEFAULT_DICTIONARY_FILENAME,
    collect_dictionary_words,
    write_error_dictionary,
)

__all__ = [
    "DEFAULT_DICTIONARY_FILENAME",
    "collect_dictionary_words",
    "write_error_dictionary",
]

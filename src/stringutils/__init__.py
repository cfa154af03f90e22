"""
stringutils - Miscellaneous string utility functions.

Null-safe emptiness and whitespace checks, literal substring replacement,
and tokenization at single-character delimiters.
"""

from stringutils.strings import has_length, has_text, replace, tokenize

__version__ = "0.1.0"
__all__ = [
    "has_length",
    "has_text",
    "replace",
    "tokenize",
]

"""
String Utilities - Core Module.

Provides null-safe string checks, literal substring replacement and
delimiter-character tokenization. Every function is pure and total:
absent or empty input yields False, the unchanged text, or an empty list.
"""

from __future__ import annotations
from typing import Iterator, List, Optional


# Characters removed by token trimming: ASCII controls and the space.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def has_length(text: Optional[str]) -> bool:
    """
    Check that the given string is neither None nor of length 0.

    Note: returns True for a string that purely consists of whitespace.
    """
    return text is not None and len(text) > 0


def has_text(text: Optional[str]) -> bool:
    """
    Check whether the given string contains actual text.

    Returns True if the string is not None, its length is greater than 0,
    and it contains at least one non-whitespace character (as classified
    by str.isspace).
    """
    return has_length(text) and _contains_text(text)


def _contains_text(text: str) -> bool:
    for ch in text:
        if not ch.isspace():
            return True
    return False


def replace(text: str, old_pattern: str, new_pattern: Optional[str]) -> str:
    """
    Replace all occurrences of a substring within a string with another string.

    Matching is literal, non-overlapping and left to right; inserted text is
    never searched again. The input is returned as-is when either string is
    empty, when new_pattern is None, or when old_pattern does not occur.

    Args:
        text: String to examine
        old_pattern: String to replace
        new_pattern: String to insert

    Returns:
        A string with the replacements
    """
    if not has_length(text) or not has_length(old_pattern) or new_pattern is None:
        return text
    if old_pattern not in text:
        return text
    return text.replace(old_pattern, new_pattern)


def _iter_raw_tokens(text: str, delimiters: str) -> Iterator[str]:
    """Yield maximal runs of non-delimiter characters, skipping delimiter runs."""
    start = None
    for pos, ch in enumerate(text):
        if ch in delimiters:
            if start is not None:
                yield text[start:pos]
                start = None
        elif start is None:
            start = pos
    if start is not None:
        yield text[start:]


def _trim(token: str) -> str:
    return token.strip(_TRIM_CHARS)


def tokenize(
    text: Optional[str],
    delimiters: Optional[str],
    trim_tokens: bool = True,
    ignore_empty_tokens: bool = True,
) -> List[str]:
    """
    Tokenize the given string into a list of tokens.

    Each character of ``delimiters`` is an independent single-character
    delimiter. Consecutive delimiters never produce a token of their own,
    so ``ignore_empty_tokens`` only applies to tokens that are empty after
    trimming.

    Args:
        text: The string to tokenize (may be None or empty)
        delimiters: The delimiter characters, assembled as a string
        trim_tokens: Strip leading/trailing characters at or below U+0020
        ignore_empty_tokens: Omit empty tokens from the result

    Returns:
        The tokens in their original order
    """
    if text is None:
        return []
    tokens: List[str] = []
    for token in _iter_raw_tokens(text, delimiters or ""):
        if trim_tokens:
            token = _trim(token)
        if not ignore_empty_tokens or token:
            tokens.append(token)
    return tokens

"""
Tokenizer for class strings

Splits a class string such as "p-4 bg-[#112233]/50 r-2" into its
whitespace-delimited tokens.
"""

import re
from typing import List

_WHITESPACE_RE = re.compile(r'\s+')


def tokenize(source: str) -> List[str]:
    """
    Split a class string into tokens

    The whole string is trimmed first, then split on runs of whitespace.
    Tokens are never empty and never contain whitespace.

    Args:
        source: Class string

    Returns:
        Tokens in input order; empty list for empty or whitespace-only input

    Example:
        >>> tokenize("  p-4\\tbg-red   r-2 ")
        ['p-4', 'bg-red', 'r-2']
        >>> tokenize("   ")
        []
    """
    trimmed = source.strip()
    if not trimmed:
        return []
    return _WHITESPACE_RE.split(trimmed)

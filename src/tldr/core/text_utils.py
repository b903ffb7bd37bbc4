"""Shared text processing utilities.

Normalization and splitting helpers used by the word and sentence scorers.
Every function here is pure and total over ``str`` input.
"""

import unicodedata
from typing import List


def _is_punctuation(char: str) -> bool:
    """True for any character in a Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return unicodedata.category(char).startswith("P")


def clean_text(text: str) -> str:
    """Remove Unicode punctuation and fold the remainder to lowercase.

    Whitespace is left untouched, so the result can still be split into the
    same word positions as the input.

    Args:
        text: Arbitrary text, possibly empty

    Returns:
        Text without punctuation characters, lowercased

    Examples:
        >>> clean_text("TEST")
        'test'
        >>> clean_text("te—st")
        'test'
        >>> clean_text("test's")
        'tests'
        >>> clean_text('"test"')
        'test'
    """
    return "".join(c for c in text if not _is_punctuation(c)).lower()


def split_words(text: str) -> List[str]:
    """Split *text* on runs of whitespace, dropping empty tokens.

    Examples:
        >>> split_words("  two   words ")
        ['two', 'words']
    """
    return text.split()


def split_sentences(text: str) -> List[str]:
    """Split *text* on every literal period.

    Pieces keep their original casing and surrounding whitespace; empty pieces
    (from consecutive or trailing periods) are kept.

    Examples:
        >>> split_sentences("One. Two.")
        ['One', ' Two', '']
    """
    return text.split(".")

"""ASCII case folding.

Only the 26 ASCII letters are folded. Every other character, including
non-ASCII letters that have case in Unicode, is left as-is, so "É" and
"é" stay distinct. Use ``str.casefold`` when Unicode-aware matching is
wanted instead.
"""

from __future__ import annotations

import string

from uncased.core.ordering import Ordering

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold(text: str) -> str:
    """Lowercase the ASCII letters of ``text``.

    Folding never changes the length of the text.

    Example:
        >>> fold("Content-Type")
        'content-type'
        >>> fold("ÉCOLE")
        'École'
    """
    # For pure-ASCII text str.lower() only touches A-Z.
    if text.isascii():
        return text.lower()
    return text.translate(_ASCII_LOWER)


def eq_ignore_ascii_case(a: str, b: str) -> bool:
    """Compare two strings, ignoring ASCII case.

    Args:
        a: First string.
        b: Second string.

    Returns:
        True if both strings have the same length and are equal once their
        ASCII letters are lowercased.

    Example:
        >>> eq_ignore_ascii_case("ENV", "env")
        True
        >>> eq_ignore_ascii_case("env", "envs")
        False
    """
    if len(a) != len(b):
        return False
    if a == b:
        return True
    return fold(a) == fold(b)


def cmp_ignore_ascii_case(a: str, b: str) -> Ordering:
    """Order two strings lexicographically, ignoring ASCII case.

    Characters are compared one by one after folding; when one string is a
    strict prefix of the other, the shorter one sorts first.

    Example:
        >>> cmp_ignore_ascii_case("apple", "Banana")
        <Ordering.LESS: -1>
    """
    folded_a = fold(a)
    folded_b = fold(b)
    if folded_a < folded_b:
        return Ordering.LESS
    if folded_a > folded_b:
        return Ordering.GREATER
    return Ordering.EQUAL

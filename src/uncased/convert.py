"""Free functions over text-like values.

"Text-like" means a ``str``, an ``UncasedStr`` or an ``Uncased``. These
helpers let callers compare and sort plain strings case-insensitively
without constructing views themselves.
"""

from __future__ import annotations

from uncased.borrowed import UncasedStr, _coerce
from uncased.core.ordering import Ordering
from uncased.owned import Uncased

TextLike = str | UncasedStr | Uncased


def as_uncased(value: TextLike) -> UncasedStr:
    """Return an ``UncasedStr`` view over any text-like value.

    Args:
        value: A str, UncasedStr or Uncased.

    Returns:
        A view over the same text; no copy is made.

    Raises:
        TypeError: If value is not text-like.
    """
    view = _coerce(value)
    if view is None:
        raise TypeError(
            f"expected str, UncasedStr or Uncased, got {type(value).__name__}"
        )
    return view


def eq(a: TextLike, b: TextLike) -> bool:
    """Return True if ``a`` and ``b`` are equal without considering ASCII case.

    Example:
        >>> eq("ENV", "env")
        True
        >>> eq("dogs are COOL!", "DOGS are cool!")
        True
    """
    return as_uncased(a) == as_uncased(b)


def compare(a: TextLike, b: TextLike) -> Ordering:
    """Three-way, ASCII case-insensitive comparison of ``a`` and ``b``."""
    return as_uncased(a).compare(b)


def sort_key(value: TextLike) -> UncasedStr:
    """Key function for case-insensitive sorting.

    Example:
        >>> sorted(["Banana", "apple", "Cherry"], key=sort_key)
        ['apple', 'Banana', 'Cherry']
    """
    return as_uncased(value)

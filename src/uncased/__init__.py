"""Case-preserving, ASCII case-insensitive strings.

An *uncased* string keeps the casing it was given, but compares, orders
and hashes as if every ASCII letter were lowercase:

    >>> from uncased import UncasedStr
    >>> UncasedStr("hello!") == UncasedStr("HelLo!")
    True
    >>> UncasedStr("HelLo!").as_str()
    'HelLo!'

Unicode case folding is not performed; only ``A``-``Z`` and ``a``-``z``
are treated as equal.

Usage:
    from uncased import UncasedStr, Uncased, UncasedDict, eq
"""

from uncased.borrowed import UncasedStr
from uncased.convert import TextLike, as_uncased, compare, eq, sort_key
from uncased.core.ordering import Ordering
from uncased.errors import ConfigError, SliceRangeError, UncasedError
from uncased.mapping import UncasedDict
from uncased.owned import Borrowed, Cow, Owned, Uncased

__version__ = "0.1.0"

__all__ = [
    # Types
    "UncasedStr",
    "Uncased",
    "Borrowed",
    "Owned",
    "Cow",
    "UncasedDict",
    "Ordering",
    "TextLike",
    # Functions
    "as_uncased",
    "compare",
    "eq",
    "sort_key",
    # Errors
    "UncasedError",
    "SliceRangeError",
    "ConfigError",
]

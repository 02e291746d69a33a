"""Case-preserving, ASCII case-insensitive view over a string.

An ``UncasedStr`` wraps an existing ``str`` without copying it. The text
keeps the casing it was created with, but equality, ordering and hashing
ignore ASCII case:

    >>> x = UncasedStr("hello!")
    >>> y = UncasedStr("HelLo!")
    >>> x == y
    True
    >>> x.as_str(), y.as_str()
    ('hello!', 'HelLo!')
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from uncased.core.folding import eq_ignore_ascii_case, fold
from uncased.core.ordering import Ordering
from uncased.errors import SliceRangeError

if TYPE_CHECKING:
    from uncased.owned import Uncased


class UncasedStr:
    """A cost-free, case-insensitive view of a string.

    Views are immutable. Comparing a view with a plain ``str`` works in
    both directions; the hash of a view is the hash of its ASCII-folded
    text, so ``hash(UncasedStr("ABC")) == hash("abc")``.

    Warning:
        A view equals a ``str`` with any casing, but only hashes like the
        lowercased one: ``UncasedStr("ABC") == "ABC"`` while
        ``hash(UncasedStr("ABC")) != hash("ABC")``. Do not mix ``str``
        keys that contain uppercase ASCII with views in one dict or set;
        wrap every key in a view, or use ``UncasedDict``.
    """

    __slots__ = ("_string", "_folded")

    def __init__(self, string: str | UncasedStr) -> None:
        if isinstance(string, UncasedStr):
            string = string._string
        elif not isinstance(string, str):
            raise TypeError(
                f"UncasedStr requires a str, got {type(string).__name__}"
            )
        self._string: str = string
        self._folded: str | None = None

    def as_str(self) -> str:
        """Return the text with its original casing.

        Example:
            >>> UncasedStr("Hello!").as_str()
            'Hello!'
        """
        return self._string

    def startswith(self, prefix: str | UncasedStr | Uncased) -> bool:
        """Return True if the text starts with any casing of ``prefix``.

        Example:
            >>> view = UncasedStr("MoOO")
            >>> view.startswith("moo"), view.startswith("MOOO")
            (True, True)
            >>> view.startswith("boo")
            False
        """
        other = _coerce(prefix)
        if other is None:
            raise TypeError(
                f"startswith() requires text, got {type(prefix).__name__}"
            )
        size = len(other._string)
        if len(self._string) < size:
            return False
        return eq_ignore_ascii_case(self._string[:size], other._string)

    def compare(self, other: str | UncasedStr | Uncased) -> Ordering:
        """Three-way, ASCII case-insensitive comparison with ``other``."""
        view = _coerce(other)
        if view is None:
            raise TypeError(f"cannot compare UncasedStr with {type(other).__name__}")
        mine, theirs = self.folded(), view.folded()
        return Ordering.from_int((mine > theirs) - (mine < theirs))

    def into_uncased(self) -> Uncased:
        """Convert this view into an owned ``Uncased`` without copying."""
        # Import here to avoid circular imports at module load
        from uncased.owned import Uncased

        return Uncased.from_owned(self._string)

    def folded(self) -> str:
        """Return the ASCII-lowercased key used for hashing and ordering."""
        if self._folded is None:
            self._folded = fold(self._string)
        return self._folded

    def _resolve_slice(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, slice):
            raise TypeError(
                f"UncasedStr indices must be slices, not {type(key).__name__}"
            )
        if key.step not in (None, 1):
            raise ValueError("UncasedStr slices do not support a step")

        length = len(self._string)
        start = 0 if key.start is None else operator.index(key.start)
        stop = length if key.stop is None else operator.index(key.stop)
        lo = start + length if start < 0 else start
        hi = stop + length if stop < 0 else stop
        if not 0 <= lo <= hi <= length:
            raise SliceRangeError(start, stop, length)
        return lo, hi

    def __getitem__(self, key: slice) -> UncasedStr:
        lo, hi = self._resolve_slice(key)
        if lo == 0 and hi == len(self._string):
            return self
        return UncasedStr(self._string[lo:hi])

    def __len__(self) -> int:
        return len(self._string)

    def __eq__(self, other: object) -> bool:
        view = _coerce(other)
        if view is None:
            return NotImplemented
        if view is self:
            return True
        return eq_ignore_ascii_case(self._string, view._string)

    def __lt__(self, other: object) -> bool:
        view = _coerce(other)
        if view is None:
            return NotImplemented
        return self.folded() < view.folded()

    def __le__(self, other: object) -> bool:
        view = _coerce(other)
        if view is None:
            return NotImplemented
        return self.folded() <= view.folded()

    def __gt__(self, other: object) -> bool:
        view = _coerce(other)
        if view is None:
            return NotImplemented
        return self.folded() > view.folded()

    def __ge__(self, other: object) -> bool:
        view = _coerce(other)
        if view is None:
            return NotImplemented
        return self.folded() >= view.folded()

    def __hash__(self) -> int:
        return hash(self.folded())

    def __str__(self) -> str:
        return self._string

    def __format__(self, format_spec: str) -> str:
        return format(self._string, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._string!r})"

    def __reduce__(self) -> tuple[type[UncasedStr], tuple[str]]:
        return (type(self), (self._string,))

    def __copy__(self) -> UncasedStr:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> UncasedStr:
        return self


def _coerce(value: object) -> UncasedStr | None:
    """Return a view over ``value`` if it is text-like, else None."""
    if isinstance(value, UncasedStr):
        return value
    if isinstance(value, str):
        return UncasedStr(value)

    # Import here to avoid circular imports at module load
    from uncased.owned import Uncased

    if isinstance(value, Uncased):
        return value.as_view()
    return None

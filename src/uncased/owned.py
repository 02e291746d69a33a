"""Owned-or-borrowed uncased strings.

An ``Uncased`` holds exactly one of two branches:

- ``Borrowed``: a reference to text the caller already has.
- ``Owned``: text the value keeps for itself.

Both branches compare, order and hash identically because every operation
goes through ``as_view()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from uncased.borrowed import UncasedStr
from uncased.core.ordering import Ordering


@dataclass(frozen=True)
class Borrowed:
    """Borrowed branch of an ``Uncased`` value."""

    text: str


@dataclass(frozen=True)
class Owned:
    """Owned branch of an ``Uncased`` value."""

    buffer: str


# Tagged union of the two branches
Cow = Union[Borrowed, Owned]


class Uncased:
    """An uncased (case-preserving) string that is owned or borrowed.

    Example:
        >>> value = Uncased("Content-Type")
        >>> value == "content-type", value == "CONTENT-Type"
        (True, True)
        >>> value.is_borrowed
        True
    """

    __slots__ = ("_cow",)

    def __init__(self, source: str | Cow | UncasedStr | Uncased) -> None:
        self._cow: Cow = _to_cow(source)

    @classmethod
    def from_borrowed(cls, text: str) -> Uncased:
        """Create a value that borrows ``text``.

        Example:
            >>> Uncased.from_borrowed("Content-Type").is_borrowed
            True
        """
        return cls(Borrowed(_require_str(text)))

    @classmethod
    def from_owned(cls, buffer: str) -> Uncased:
        """Create a value that owns ``buffer``.

        Example:
            >>> Uncased.from_owned("Content-Type").is_owned
            True
        """
        return cls(Owned(_require_str(buffer)))

    @property
    def cow(self) -> Cow:
        """The active branch."""
        return self._cow

    @property
    def is_borrowed(self) -> bool:
        return isinstance(self._cow, Borrowed)

    @property
    def is_owned(self) -> bool:
        return isinstance(self._cow, Owned)

    def as_str(self) -> str:
        """Return the text of the active branch with its original casing."""
        if isinstance(self._cow, Owned):
            return self._cow.buffer
        return self._cow.text

    def as_view(self) -> UncasedStr:
        """Borrow the active branch as an ``UncasedStr``."""
        return UncasedStr(self.as_str())

    def into_string(self) -> str:
        """Return the text as an owned string.

        A borrowed value takes its own reference to the text here; this is
        the only point at which an ``Uncased`` acquires storage.

        Example:
            >>> Uncased("Content-Type").into_string()
            'Content-Type'
        """
        if isinstance(self._cow, Owned):
            return self._cow.buffer
        return str(self._cow.text)

    def into_owned(self) -> Uncased:
        """Return an owned value with the same text."""
        if isinstance(self._cow, Owned):
            return self
        return Uncased.from_owned(self.into_string())

    def into_boxed_uncased(self) -> UncasedStr:
        """Convert into a view over the owned text.

        Example:
            >>> boxed = Uncased("Content-Type").into_boxed_uncased()
            >>> boxed == "content-type"
            True
        """
        return UncasedStr(self.into_string())

    def into_cow(self) -> Cow:
        return self._cow

    def startswith(self, prefix: str | UncasedStr | Uncased) -> bool:
        return self.as_view().startswith(prefix)

    def compare(self, other: str | UncasedStr | Uncased) -> Ordering:
        return self.as_view().compare(other)

    def __getitem__(self, key: slice) -> UncasedStr:
        return self.as_view()[key]

    def __len__(self) -> int:
        return len(self.as_str())

    def __eq__(self, other: object) -> bool:
        return self.as_view().__eq__(other)

    def __lt__(self, other: object) -> bool:
        return self.as_view().__lt__(other)

    def __le__(self, other: object) -> bool:
        return self.as_view().__le__(other)

    def __gt__(self, other: object) -> bool:
        return self.as_view().__gt__(other)

    def __ge__(self, other: object) -> bool:
        return self.as_view().__ge__(other)

    def __hash__(self) -> int:
        return hash(self.as_view())

    def __str__(self) -> str:
        return self.as_str()

    def __format__(self, format_spec: str) -> str:
        return format(self.as_str(), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cow!r})"

    def __reduce__(self) -> tuple[type[Uncased], tuple[Cow]]:
        return (type(self), (self._cow,))

    def __copy__(self) -> Uncased:
        # Branches are frozen, so cloning shares them.
        return type(self)(self._cow)

    def __deepcopy__(self, memo: dict[int, Any]) -> Uncased:
        return self.__copy__()


def _require_str(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Uncased requires a str, got {type(text).__name__}")
    return text


def _to_cow(source: object) -> Cow:
    """Normalize any accepted source into a branch without copying."""
    if isinstance(source, Borrowed):
        _require_str(source.text)
        return source
    if isinstance(source, Owned):
        _require_str(source.buffer)
        return source
    if isinstance(source, Uncased):
        return source._cow
    if isinstance(source, UncasedStr):
        return Borrowed(source.as_str())
    return Borrowed(_require_str(source))

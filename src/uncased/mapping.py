"""Case-insensitive mapping keyed by uncased strings.

Intended for protocol header names and configuration keys: lookups ignore
ASCII case, while iteration reports each key with the casing it was last
assigned with.

    >>> headers = UncasedDict({"Content-Type": "text/plain"})
    >>> headers["content-type"]
    'text/plain'
    >>> headers["CONTENT-TYPE"] = "application/json"
    >>> list(headers)
    ['CONTENT-TYPE']
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, TypeVar

from uncased.convert import TextLike, as_uncased

V = TypeVar("V")


class UncasedDict(MutableMapping[str, V]):
    """A dict whose text keys are compared ignoring ASCII case.

    Internally each entry is stored as ``{UncasedStr: (original_key, value)}``,
    so the folded key is computed once per assignment.
    """

    def __init__(
        self,
        data: Mapping[str, V] | Iterable[tuple[str, V]] | None = None,
        **kwargs: V,
    ) -> None:
        self._store: dict[Any, tuple[str, V]] = {}
        if data is not None:
            self.update(data)
        self.update(kwargs)

    def __setitem__(self, key: TextLike, value: V) -> None:
        view = as_uncased(key)
        # Re-inserting keeps dict order but replaces the stored key casing.
        self._store[view] = (view.as_str(), value)

    def __getitem__(self, key: TextLike) -> V:
        return self._store[self._lookup_key(key)][1]

    def __delitem__(self, key: TextLike) -> None:
        del self._store[self._lookup_key(key)]

    def __contains__(self, key: object) -> bool:
        try:
            view = as_uncased(key)  # type: ignore[arg-type]
        except TypeError:
            return False
        return view in self._store

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def lower_items(self) -> Iterator[tuple[str, V]]:
        """Iterate over (folded key, value) pairs."""
        return ((view.folded(), entry[1]) for view, entry in self._store.items())

    def copy(self) -> UncasedDict[V]:
        return UncasedDict(self._store.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if not isinstance(other, UncasedDict):
            try:
                converted = UncasedDict(other)
            except TypeError:
                return False
            # Keys differing only in case collapse into one entry.
            if len(converted) != len(other):
                return False
            other = converted
        return dict(self.lower_items()) == dict(other.lower_items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def _lookup_key(self, key: TextLike) -> Any:
        try:
            view = as_uncased(key)
        except TypeError:
            raise KeyError(key) from None
        return view

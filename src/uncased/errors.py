"""Exceptions raised by the uncased package."""

from __future__ import annotations

from pathlib import Path


class UncasedError(Exception):
    """Base class for errors raised by this package."""


class SliceRangeError(UncasedError, IndexError):
    """A slice does not fall within the text it is applied to.

    Raised instead of silently truncating the range the way plain ``str``
    slicing does.
    """

    def __init__(self, start: int, stop: int, length: int) -> None:
        self.start = start
        self.stop = stop
        self.length = length
        super().__init__(
            f"slice [{start}:{stop}] is out of range for text of length {length}"
        )


class ConfigError(UncasedError):
    """Configuration could not be loaded or validated."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        path: Path | None = None,
    ) -> None:
        self.message = message
        self.field = field
        self.path = path
        super().__init__(message)

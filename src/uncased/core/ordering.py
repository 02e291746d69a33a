"""Three-way comparison result."""

from enum import IntEnum


class Ordering(IntEnum):
    """Result of comparing two uncased strings.

    The integer values follow the ``cmp`` convention, so a comparison
    function returning an Ordering can be passed to
    ``functools.cmp_to_key`` directly.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """Return the Ordering matching the sign of ``value``."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        """Swap LESS and GREATER; EQUAL is unchanged."""
        return Ordering(-self.value)

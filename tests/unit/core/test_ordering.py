"""Tests for the Ordering enum."""

import functools

from uncased.core.ordering import Ordering


class TestOrdering:
    """Tests for Ordering."""

    def test_values_follow_cmp_convention(self) -> None:
        """LESS/EQUAL/GREATER are -1/0/1."""
        assert int(Ordering.LESS) == -1
        assert int(Ordering.EQUAL) == 0
        assert int(Ordering.GREATER) == 1

    def test_from_int_uses_sign(self) -> None:
        """from_int maps any integer by its sign."""
        assert Ordering.from_int(-42) is Ordering.LESS
        assert Ordering.from_int(0) is Ordering.EQUAL
        assert Ordering.from_int(7) is Ordering.GREATER

    def test_reverse(self) -> None:
        """reverse swaps LESS and GREATER."""
        assert Ordering.LESS.reverse() is Ordering.GREATER
        assert Ordering.GREATER.reverse() is Ordering.LESS
        assert Ordering.EQUAL.reverse() is Ordering.EQUAL

    def test_usable_with_cmp_to_key(self) -> None:
        """An Ordering-returning function works with cmp_to_key."""

        def by_length(a: str, b: str) -> Ordering:
            return Ordering.from_int(len(a) - len(b))

        result = sorted(["ccc", "a", "bb"], key=functools.cmp_to_key(by_length))
        assert result == ["a", "bb", "ccc"]

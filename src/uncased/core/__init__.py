"""Core utilities package.

Pure functions with no dependencies outside the standard library: ASCII
case folding and the three-way comparison result used across the package.
"""

from uncased.core.folding import (
    cmp_ignore_ascii_case,
    eq_ignore_ascii_case,
    fold,
)
from uncased.core.ordering import Ordering

__all__ = [
    # folding
    "fold",
    "eq_ignore_ascii_case",
    "cmp_ignore_ascii_case",
    # ordering
    "Ordering",
]

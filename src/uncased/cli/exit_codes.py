"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1: Comparison did not match (like ``test`` and ``grep``)
    2: Usage error (reported by click)
    10-19: Configuration errors
    20-29: Input errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for uncased CLI commands."""

    # Success (0)
    SUCCESS = 0

    # Predicate commands (eq, startswith) answered "no"
    NO_MATCH = 1

    # Bad arguments; click exits with 2 on its own
    USAGE_ERROR = 2

    # Configuration errors (10-19)
    CONFIG_ERROR = 10

    # Input errors (20-29)
    INPUT_ERROR = 20

"""Structured logging module.

Provides configurable logging with JSON format support and file rotation.
"""

from uncased.logging.config import configure_logging
from uncased.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]

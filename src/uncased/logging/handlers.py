"""JSON log formatting for ``--log-json`` and ``logging.format: json``."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message"}


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Keys: ``timestamp`` (UTC ISO-8601), ``level``, ``message``, ``logger``
    unless it is the root logger, ``context`` for ``extra`` fields and
    ``exception`` when a traceback is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name != "root":
            entry["logger"] = record.name

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # str() keeps the original casing of UncasedStr and Uncased extras
        return json.dumps(entry, default=str)

"""
Custom log formatters for structured logging.
"""
from __future__ import annotations

import json
import logging

EXTRA_FIELDS = ("operation", "sort", "terms", "duration_ms", "error_type", "path", "method")


class JsonFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs log records as JSON objects with standard fields (timestamp, level, logger, message)
    plus any extra context fields like operation name, sort string and duration.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: The log record to format

        Returns:
            JSON-formatted log string
        """
        base = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in EXTRA_FIELDS:
            if hasattr(record, k):
                base[k] = getattr(record, k)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)

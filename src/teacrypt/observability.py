"""Log handler setup for the ``teacrypt`` command.

The library only emits records; this module decides where they go. Records
from the cipher adapters and the CLI may carry ``error_code``, ``cipher`` and
byte counts as ``extra`` fields, which both output formats keep.
"""

from __future__ import annotations

import json
import logging
import time

CONTEXT_FIELDS = ("cipher", "error_code", "input_bytes", "output_bytes")

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s%(context)s"


def record_context(record: logging.LogRecord) -> dict:
    """Pull the known ``extra`` fields that are set on ``record``."""
    return {
        name: getattr(record, name)
        for name in CONTEXT_FIELDS
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message, context."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Plain lines with the context appended as ``key=value`` pairs."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        context = record_context(record)
        record.context = "".join(f" {k}={v}" for k, v in context.items())
        return super().format(record)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Attach a stderr handler to the root logger.

    Returns the handler so the caller can detach it again.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.getLevelName(level.upper()))
    return handler

"""
Logging — structured records for the API, readable lines for the CLI.

Every logger lives under the ``swearcounter`` namespace. Context is
passed through ``extra=`` and rendered by whichever formatter is active:

    JSON (API default)   {"timestamp": ..., "level": ..., "files_scanned": 12}
    text (CLI)           2026-01-01 12:00:00 INFO  transcripts: Transcript scan complete files_scanned=12

Usage:
    from swearcounter.logging import get_logger
    logger = get_logger("transcripts")
    logger.info("Transcript scan complete", extra={"files_scanned": 12})

Environment:
    SWEARCOUNTER_LOG_LEVEL   DEBUG / INFO / WARNING ... (default INFO)
    SWEARCOUNTER_LOG_FORMAT  json | text (default json)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import IO, Optional

NAMESPACE = "swearcounter"

LOG_LEVEL = os.getenv("SWEARCOUNTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("SWEARCOUNTER_LOG_FORMAT", "json")

# Attributes every LogRecord carries; anything else arrived via extra=
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def record_context(record: logging.LogRecord) -> dict:
    """The caller-supplied ``extra=`` fields of a record, in insertion order."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


def _short_name(name: str) -> str:
    prefix = NAMESPACE + "."
    return name[len(prefix):] if name.startswith(prefix) else name


class JSONFormatter(logging.Formatter):
    """One JSON object per line; context fields sit beside the message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record_context(record).items():
            if value is not None:
                entry[key] = value

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Terminal format: short logger name, message, then key=value context."""

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = "%s %-5s %s: %s" % (
            self.formatTime(record, self.datefmt),
            record.levelname,
            _short_name(record.name),
            record.getMessage(),
        )
        context = " ".join(
            f"{key}={value}"
            for key, value in record_context(record).items()
            if value is not None
        )
        if context:
            line = f"{line} {context}"
        if record.exc_info and record.exc_info[0]:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    log_format: Optional[str] = None,
    level: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Install a single handler on the ``swearcounter`` logger.

    Safe to call more than once; the previous handler is replaced. Output
    goes to stderr by default so the CLI's ``--json`` stdout stays parseable.
    Records do not propagate to the root logger.
    """
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if (log_format or LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Named logger under the swearcounter namespace."""
    return logging.getLogger(f"{NAMESPACE}.{name}")

"""Structured JSON logging for the archrecon project.

All log records are emitted as JSON lines so that reconstruction runs can be
grepped and post-processed alongside the analysis pipeline that drives them.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


# Standard LogRecord attributes that are part of every record, NOT user "extra" fields.
_STANDARD_RECORD_ATTRS: frozenset[str] = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "id", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread",
    "threadName", "taskName",
})


class _JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                log_obj[key] = value

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


# Prefix for caller fields that collide with a LogRecord attribute.
_EXTRA_PREFIX = "extra_"


def _safe_extra(extra: dict[str, Any]) -> dict[str, Any] | None:
    """Rename keys stdlib logging would refuse ("name", "lineno", ...)."""
    if not extra:
        return None
    return {
        (f"{_EXTRA_PREFIX}{key}" if key in _STANDARD_RECORD_ATTRS else key): value
        for key, value in extra.items()
    }


class StructuredLogger:
    """Thin wrapper around stdlib Logger that emits JSON-formatted records.

    Usage::

        logger = get_logger("archrecon.builder")
        logger.debug("Creating connector", composite="Shop", required="Cart")

    Keyword arguments are merged into the JSON output alongside the standard
    timestamp / level / name / message fields. A keyword that collides with a
    LogRecord attribute is written as ``extra_<key>`` instead.
    """

    def __init__(self, name: str, level: int = logging.DEBUG) -> None:
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(_JSONFormatter())
            self._logger.addHandler(handler)
            self._logger.propagate = False
        self._logger.setLevel(level)

    def log(self, level: int, msg: str, **extra: Any) -> None:
        self._logger.log(level, msg, extra=_safe_extra(extra))

    def debug(self, msg: str, **extra: Any) -> None:
        self._logger.debug(msg, extra=_safe_extra(extra))

    def info(self, msg: str, **extra: Any) -> None:
        self._logger.info(msg, extra=_safe_extra(extra))

    def warning(self, msg: str, **extra: Any) -> None:
        self._logger.warning(msg, extra=_safe_extra(extra))

    def error(self, msg: str, **extra: Any) -> None:
        self._logger.error(msg, extra=_safe_extra(extra))

    def exception(self, msg: str, **extra: Any) -> None:
        self._logger.exception(msg, extra=_safe_extra(extra))

    def set_level(self, level: int) -> None:
        """Change the threshold of an existing (possibly cached) logger."""
        self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def level(self) -> int:
        return self._logger.level


_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str, level: int | None = None) -> StructuredLogger:
    """Return a named StructuredLogger, creating it if it does not yet exist.

    Args:
        name: Logger name, typically a dotted ``archrecon.*`` path.
        level: Logging level. A new logger defaults to DEBUG; for a cached
            logger the level is only changed when one is given.

    Returns:
        A StructuredLogger instance.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, level=logging.DEBUG if level is None else level)
    elif level is not None:
        _loggers[name].set_level(level)
    return _loggers[name]

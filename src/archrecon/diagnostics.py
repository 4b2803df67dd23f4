"""Diagnostics sinks used by the connector construction core.

The builders never talk to a logger directly; they receive a ``Diagnostics``
object and call ``emit(level, message, **extra)`` on it. Levels are the
stdlib ``logging`` integers. Emitting never changes control flow.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from archrecon.utils.logging import StructuredLogger, get_logger

DEFAULT_LOGGER_NAME = "archrecon.builder"


class Diagnostics(ABC):
    """Sink for observational events raised while building connectors."""

    @abstractmethod
    def emit(self, level: int, message: str, **extra: Any) -> None:
        """Record one diagnostic event."""


class LoggerDiagnostics(Diagnostics):
    """Forwards events to a StructuredLogger as JSON log lines."""

    def __init__(self, logger: StructuredLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger(DEFAULT_LOGGER_NAME)

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    def emit(self, level: int, message: str, **extra: Any) -> None:
        self._logger.log(level, message, **extra)


@dataclass(frozen=True)
class DiagnosticEvent:
    level: int
    message: str
    extra: dict[str, Any] = field(default_factory=dict)


class RecordingDiagnostics(Diagnostics):
    """Keeps every emitted event in memory.

    Useful for callers that want to inspect lookup warnings after a batch of
    wiring requests, and for tests.
    """

    def __init__(self) -> None:
        self.events: list[DiagnosticEvent] = []

    def emit(self, level: int, message: str, **extra: Any) -> None:
        self.events.append(DiagnosticEvent(level=level, message=message, extra=dict(extra)))

    def at_level(self, level: int) -> list[DiagnosticEvent]:
        return [event for event in self.events if event.level == level]

    @property
    def warnings(self) -> list[DiagnosticEvent]:
        return self.at_level(logging.WARNING)

    def clear(self) -> None:
        self.events.clear()

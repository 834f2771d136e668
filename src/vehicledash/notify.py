"""Notification sinks.

The dashboard only decides *when* to notify and with *what* message;
displaying it is up to the sink it was given.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

_logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Fire-and-forget sink for transient user messages."""

    def notify_success(self, message: str) -> None:
        ...

    def notify_error(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Sends notifications to a logger (INFO for success, ERROR for errors)."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger

    def notify_success(self, message: str) -> None:
        self._logger.info("%s", message)

    def notify_error(self, message: str) -> None:
        self._logger.error("%s", message)


class ConsoleNotifier:
    """Prints notifications for interactive use."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    def notify_success(self, message: str) -> None:
        print(f"[ok] {message}", file=self._out or sys.stdout)

    def notify_error(self, message: str) -> None:
        print(f"[error] {message}", file=self._err or sys.stderr)

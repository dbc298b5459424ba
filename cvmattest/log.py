"""Pluggable logging for the attestation client library."""

from __future__ import annotations

import abc
import enum
import sys
import threading
from typing import Any

LOG_TAG = "AttestatationClientLib"


class LogLevel(enum.IntEnum):
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3

    @property
    def label(self) -> str:
        """Display name of the level, such as "Error" or "Warn"."""
        return self.name.capitalize()


class AttestationLogger(abc.ABC):
    """Receives the library's log messages; ``fmt`` is a printf-style format."""

    @abc.abstractmethod
    def log(
        self,
        tag: str,
        level: LogLevel,
        function: str,
        line: int,
        fmt: str,
        *args: Any,
    ) -> None:
        """Handle one log message."""


_logger: AttestationLogger | None = None
_lock = threading.Lock()


def set_logger(logger: AttestationLogger) -> None:
    """Install the library logger. Only the first installed logger is kept."""
    global _logger
    with _lock:
        if _logger is None:
            _logger = logger


def get_logger() -> AttestationLogger | None:
    """Return the installed logger, or None if none has been set."""
    return _logger


def _emit(level: LogLevel, fmt: str, args: tuple[Any, ...]) -> None:
    logger = _logger
    if logger is None:
        return
    caller = sys._getframe(2)
    logger.log(LOG_TAG, level, caller.f_code.co_name, caller.f_lineno, fmt, *args)


def log_error(fmt: str, *args: Any) -> None:
    _emit(LogLevel.ERROR, fmt, args)


def log_warn(fmt: str, *args: Any) -> None:
    _emit(LogLevel.WARN, fmt, args)


def log_info(fmt: str, *args: Any) -> None:
    _emit(LogLevel.INFO, fmt, args)


def log_debug(fmt: str, *args: Any) -> None:
    _emit(LogLevel.DEBUG, fmt, args)
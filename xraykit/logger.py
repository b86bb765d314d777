"""Levelled logging used throughout the package."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Callable, Protocol, TextIO, Union

Message = Union[str, Callable[[], str]]


class LogLevel(IntEnum):
    """Severity of a log record; higher values are more severe."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


class Logger(Protocol):
    """Anything able to receive log records."""

    def log(self, level: LogLevel, message: Message) -> None:
        ...


class DefaultLogger:
    """Writes records at or above a minimum level to a text stream.

    A message may be a string or a callable returning one; the callable is
    only invoked when the record is actually written.
    """

    def __init__(self, stream: TextIO | None = None, level: LogLevel = LogLevel.INFO) -> None:
        self._stream = stream
        self.level = LogLevel(level)

    def log(self, level: LogLevel, message: Message) -> None:
        level = LogLevel(level)
        if level < self.level:
            return
        text = message() if callable(message) else str(message)
        stream = self._stream if self._stream is not None else sys.stdout
        timestamp = datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")
        stream.write(f"{timestamp} [{level.name}] {text}\n")


@dataclass
class _Active:
    """Holds the logger the package currently writes to."""

    logger: Logger


_active = _Active(DefaultLogger(None, LogLevel.INFO))


def set_logger(logger: Logger) -> None:
    """Replace the logger used by the package.

    Raises TypeError if ``logger`` has no callable ``log`` method.
    """
    if not callable(getattr(logger, "log", None)):
        raise TypeError(f"logger must provide a callable 'log' method, got {type(logger).__name__}")
    _active.logger = logger


def get_logger() -> Logger:
    """Return the logger currently used by the package."""
    return _active.logger


def _deferred(message: object, args: tuple) -> Callable[[], str]:
    def render() -> str:
        return str(message) % args if args else str(message)

    return render


def debug(message: object, *args: object) -> None:
    """Log at debug level."""
    _active.logger.log(LogLevel.DEBUG, _deferred(message, args))


def debug_deferred(fn: Callable[[], str]) -> None:
    """Log at debug level, calling ``fn`` only if the record is written."""
    _active.logger.log(LogLevel.DEBUG, fn)


def info(message: object, *args: object) -> None:
    """Log at info level."""
    _active.logger.log(LogLevel.INFO, _deferred(message, args))


def warn(message: object, *args: object) -> None:
    """Log at warning level."""
    _active.logger.log(LogLevel.WARN, _deferred(message, args))


def error(message: object, *args: object) -> None:
    """Log at error level."""
    _active.logger.log(LogLevel.ERROR, _deferred(message, args))
"""Thread-safe leveled logger with an optional message callback."""

from __future__ import annotations

import sys
import threading
from enum import IntEnum
from typing import Callable, Optional

_MAX_MESSAGE = 4094

LEVEL_ERROR = 0
LEVEL_WARN = 1
LEVEL_INFO = 2
LEVEL_DEBUG = 3
LEVEL_VERBOSE = 4


class LogLevel(IntEnum):
    """Syslog-style severity levels."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


LogCallback = Callable[[int, str], None]


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


class Logger:
    """Logger that drops messages above its level and routes the rest."""

    def __init__(self) -> None:
        self._level_lock = threading.Lock()
        self._callback_lock = threading.Lock()
        self.level: int = LogLevel.WARNING
        self._callback: Optional[LogCallback] = None

    def set_level(self, level: int) -> None:
        with self._level_lock:
            self.level = level

    def set_callback(self, callback: Optional[LogCallback]) -> None:
        """Route messages to ``callback(level, message)``; None restores stderr."""
        with self._callback_lock:
            self._callback = callback

    def log(self, level: int, fmt: str, *args) -> None:
        with self._level_lock:
            if level > self.level:
                return
        message = _format(fmt, args)[:_MAX_MESSAGE]
        with self._callback_lock:
            callback = self._callback
            if callback is not None:
                callback(level, message)
                return
        print(message, file=sys.stderr)


def console_log(level: int, fmt: str, *args) -> None:
    """Print a formatted message to stdout regardless of level."""
    print(_format(fmt, args))
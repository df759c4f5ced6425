"""Leveled loggers with a bounded message length."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, TextIO

CONSOLE_LOG_MAX_LENGTH = 256


class LogType(IntEnum):
    TRACE = 1
    INFO = 2
    ERROR = 3
    WARN = 4
    DEBUG = 5


class ConsoleColor(IntEnum):
    GREEN = 2
    BLUE = 9
    RED = 12
    YELLOW = 14
    WHITE = 15


_ANSI_CODES = {
    ConsoleColor.GREEN: "32",
    ConsoleColor.BLUE: "94",
    ConsoleColor.RED: "91",
    ConsoleColor.YELLOW: "93",
    ConsoleColor.WHITE: "97",
}


class LoggerBase(ABC):
    """Formats messages and routes them by level to an output."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def write(self, log_type: LogType | int, fmt: str, *args: Any) -> None:
        """Format ``fmt`` %-style with ``args`` and log it at ``log_type``."""
        text = fmt % args if args else fmt
        text = text[: CONSOLE_LOG_MAX_LENGTH - 1]
        handlers = {
            LogType.TRACE: self.trace,
            LogType.INFO: self.info,
            LogType.ERROR: self.error,
            LogType.WARN: self.warn,
            LogType.DEBUG: self.debug,
        }
        handlers[LogType(log_type)](text)

    def trace(self, text: str) -> None:
        self._output(ConsoleColor.BLUE, "[TRACE] ", text)

    def info(self, text: str) -> None:
        self._output(ConsoleColor.GREEN, "[INFO] ", text)

    def error(self, text: str) -> None:
        self._output(ConsoleColor.RED, "[ERROR] ", text)

    def warn(self, text: str) -> None:
        self._output(ConsoleColor.YELLOW, "[WARN] ", text)

    def debug(self, text: str) -> None:
        self._output(ConsoleColor.WHITE, "[DEBUG] ", text)

    @abstractmethod
    def _output(self, color: ConsoleColor, head: str, text: str) -> None:
        """Emit one formatted line."""


class ConsoleLogger(LoggerBase):
    """Writes log lines to a text stream, coloured when it is a terminal."""

    def __init__(self, stream: TextIO | None = None, debug: bool = False) -> None:
        super().__init__()
        self._stream = stream
        self._debug_enabled = debug

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def debug(self, text: str) -> None:
        if self._debug_enabled:
            super().debug(text)

    def _output(self, color: ConsoleColor, head: str, text: str) -> None:
        stream = self.stream
        line = f"{head}{text}"
        isatty = getattr(stream, "isatty", None)
        if isatty is not None and isatty():
            line = f"\x1b[{_ANSI_CODES[color]}m{line}\x1b[0m"
        with self._lock:
            stream.write(line + "\n")
            stream.flush()
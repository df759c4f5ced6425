"""Engine-wide state: exit request, timing, application clock and command line."""

from __future__ import annotations

import threading
import time

CLIENT_WIDTH = 1280
CLIENT_HEIGHT = 720

_exit_event = threading.Event()
_exit_reasons: list[str] = []


def is_engine_exit_requested() -> bool:
    """Return True once an engine exit has been requested."""
    return _exit_event.is_set()


def request_engine_exit(reason: str = "") -> None:
    """Ask the engine loop to stop, remembering why."""
    _exit_reasons.append(reason)
    _exit_event.set()


class PlatformTime:
    """High-resolution clock measured in cycles of the performance counter."""

    seconds_per_cycle = 0.0
    seconds_per_cycle64 = 0.0
    last_interval_cpu_time_in_seconds = 0.0

    _FREQUENCY = 1_000_000_000

    @classmethod
    def init(cls) -> float:
        """Set up the cycle length and return the current time in seconds."""
        cls.seconds_per_cycle = 1.0 / cls._FREQUENCY
        cls.seconds_per_cycle64 = 1.0 / cls._FREQUENCY
        return cls.seconds()

    @classmethod
    def seconds(cls) -> float:
        """Return the counter value in seconds; zero before init()."""
        return time.perf_counter_ns() * cls.seconds_per_cycle


START_TIME = PlatformTime.init()


class App:
    """Application clock shared by the engine loop."""

    current_time = 0.0
    delta_time = 1 / 30.0


class CommandLine:
    """The process command line, stored once at start-up."""

    MAX_COMMAND_LINE = 1 << 14

    _initialized = False
    _command_line = ""

    @classmethod
    def is_init(cls) -> bool:
        return cls._initialized

    @classmethod
    def get(cls) -> str:
        """Return the stored command line; raise if it was never set."""
        if not cls._initialized:
            raise RuntimeError("command line has not been set")
        return cls._command_line

    @classmethod
    def set(cls, command_line: str) -> bool:
        """Store ``command_line``; raise ValueError if it does not fit."""
        if len(command_line) >= cls.MAX_COMMAND_LINE:
            raise ValueError(
                f"command line longer than {cls.MAX_COMMAND_LINE - 1} characters"
            )
        cls._command_line = command_line
        cls._initialized = True
        return cls._initialized
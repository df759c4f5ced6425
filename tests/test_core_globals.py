import time

import pytest

from hopstep.core_globals import (
    CLIENT_HEIGHT,
    CLIENT_WIDTH,
    START_TIME,
    App,
    CommandLine,
    PlatformTime,
    is_engine_exit_requested,
    request_engine_exit,
)


def test_request_engine_exit():
    request_engine_exit("WM_QUIT")
    assert is_engine_exit_requested() is True


def test_platform_time_is_monotonic():
    start = PlatformTime.init()
    later = PlatformTime.seconds()
    assert later >= start
    assert start >= START_TIME


def test_cycle_length_after_init():
    start = PlatformTime.init()
    time.sleep(0.01)
    elapsed = PlatformTime.seconds() - start
    assert elapsed >= 0.005
    assert PlatformTime.seconds_per_cycle == PlatformTime.seconds_per_cycle64 > 0


def test_app_defaults():
    start = PlatformTime.init()
    assert start >= START_TIME
    assert App.delta_time == pytest.approx(1 / 30.0)
    assert (CLIENT_WIDTH, CLIENT_HEIGHT) == (1280, 720)


def test_command_line_round_trip():
    assert CommandLine.set("-game -log") is True
    assert CommandLine.is_init()
    assert CommandLine.get() == "-game -log"


def test_command_line_too_long():
    with pytest.raises(ValueError):
        CommandLine.set("x" * CommandLine.MAX_COMMAND_LINE)


def test_command_line_limit_fits():
    text = "y" * (CommandLine.MAX_COMMAND_LINE - 1)
    CommandLine.set(text)
    assert CommandLine.get() == text
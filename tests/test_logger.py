import io

import pytest

from hopstep.logger import (
    CONSOLE_LOG_MAX_LENGTH,
    ConsoleLogger,
    LoggerBase,
    LogType,
)


def test_info_line():
    out = io.StringIO()
    ConsoleLogger(out).write(LogType.INFO, "value %d", 5)
    assert out.getvalue() == "[INFO] value 5\n"


@pytest.mark.parametrize(
    "log_type, head",
    [
        (LogType.TRACE, "[TRACE] "),
        (LogType.ERROR, "[ERROR] "),
        (LogType.WARN, "[WARN] "),
    ],
)
def test_heads(log_type, head):
    out = io.StringIO()
    ConsoleLogger(out).write(log_type, "msg")
    assert out.getvalue() == head + "msg\n"


def test_debug_suppressed_by_default():
    out = io.StringIO()
    ConsoleLogger(out).write(LogType.DEBUG, "hidden")
    assert out.getvalue() == ""


def test_debug_enabled():
    out = io.StringIO()
    ConsoleLogger(out, debug=True).write(LogType.DEBUG, "shown")
    assert out.getvalue() == "[DEBUG] shown\n"


def test_message_truncated():
    out = io.StringIO()
    ConsoleLogger(out).write(LogType.INFO, "z" * 1000)
    assert out.getvalue() == "[INFO] " + "z" * (CONSOLE_LOG_MAX_LENGTH - 1) + "\n"


def test_routing_order():
    out = io.StringIO()
    logger = ConsoleLogger(out)
    logger.write(LogType.ERROR, "bad")
    logger.write(LogType.INFO, "ok")
    assert out.getvalue() == "[ERROR] bad\n[INFO] ok\n"


def test_percent_kept_without_args():
    out = io.StringIO()
    ConsoleLogger(out).write(LogType.TRACE, "100%")
    assert out.getvalue() == "[TRACE] 100%\n"


def test_unknown_level():
    with pytest.raises(ValueError):
        ConsoleLogger(io.StringIO()).write(9, "x")


def test_base_is_abstract():
    with pytest.raises(TypeError):
        LoggerBase()
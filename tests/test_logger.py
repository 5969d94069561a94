import io
import sys
from datetime import datetime, timezone

import pytest

from logx.levels import (
    GRAY_COLOR,
    REGULAR_COLOR,
    TIME_FORMAT,
    LogLevel,
    LogWriter,
)
from logx.logger import Logger

STAMP = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
STAMP_TEXT = "2024-01-02 03:04:05 +0000"


def test_defaults():
    logger = Logger()
    assert logger.time_format == TIME_FORMAT
    assert logger.output is sys.stderr
    assert logger.colors is True


def test_plain_line():
    logger = Logger(colors=False, output=io.StringIO())
    assert logger.format_line(STAMP, LogLevel.INFO, "hello") == (
        STAMP_TEXT + " INF hello\n"
    )


def test_colored_line():
    logger = Logger(output=io.StringIO())
    line = logger.format_line(STAMP, LogLevel.ERROR, "boom")
    assert line == (
        GRAY_COLOR
        + STAMP_TEXT
        + " "
        + LogLevel.ERROR.color()
        + "ERR "
        + REGULAR_COLOR
        + "boom\n"
    )


def test_custom_time_format():
    logger = Logger(time_format="%H:%M", colors=False, output=io.StringIO())
    assert logger.format_line(STAMP, LogLevel.WARN, "x") == "03:04 WRN x\n"


def test_toggle_colors():
    logger = Logger(output=io.StringIO())
    colored = logger.format_line(STAMP, LogLevel.DEBUG, "m")
    logger.disable_colors()
    assert logger.colors is False
    plain = logger.format_line(STAMP, LogLevel.DEBUG, "m")
    assert GRAY_COLOR not in plain
    assert plain.endswith("DBG m\n")
    logger.enable_colors()
    assert logger.format_line(STAMP, LogLevel.DEBUG, "m") == colored


@pytest.mark.parametrize("colors", [True, False])
def test_write_log_writes_formatted_line(colors):
    stream = io.StringIO()
    logger = Logger(output=stream, colors=colors)
    logger.write_log(STAMP, LogLevel.FATAL, "first")
    logger.write_log(STAMP, LogLevel.PANIC, "second")
    assert stream.getvalue() == (
        logger.format_line(STAMP, LogLevel.FATAL, "first")
        + logger.format_line(STAMP, LogLevel.PANIC, "second")
    )


def test_output_can_be_replaced():
    first, second = io.StringIO(), io.StringIO()
    logger = Logger(output=first, colors=False)
    logger.output = second
    logger.write_log(STAMP, LogLevel.INFO, "moved")
    assert first.getvalue() == ""
    assert second.getvalue().endswith("INF moved\n")


def test_unknown_level_raises():
    logger = Logger(output=io.StringIO())
    with pytest.raises(ValueError):
        logger.write_log(STAMP, 9, "bad")


def test_logger_is_a_log_writer():
    stream = io.StringIO()
    logger = Logger(output=stream, colors=False)
    assert isinstance(logger, LogWriter)
    writer: LogWriter = logger
    writer.write_log(STAMP, LogLevel.INFO, "via protocol")
    assert stream.getvalue() == STAMP_TEXT + " INF via protocol\n"
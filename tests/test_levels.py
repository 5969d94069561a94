import sys
from datetime import datetime

import pytest

from logx.levels import (
    BOLD_RED_COLOR,
    COLOR_PREFIX,
    GREEN_COLOR,
    RED_COLOR,
    YELLOW_COLOR,
    LogLevel,
    LogWriter,
    default_output,
    default_output as _default_output,
    level_color,
    level_text,
)


def test_level_order_matches_source():
    assert [int(level) for level in LogLevel] == [0, 1, 2, 3, 4, 5]
    assert LogLevel.INFO < LogLevel.PANIC
    assert [level_text(level) for level in sorted(LogLevel)] == [
        "INF",
        "DBG",
        "WRN",
        "ERR",
        "FTL",
        "PNC",
    ]


@pytest.mark.parametrize(
    "level, text",
    [
        (LogLevel.INFO, "INF"),
        (LogLevel.DEBUG, "DBG"),
        (LogLevel.WARN, "WRN"),
        (LogLevel.ERROR, "ERR"),
        (LogLevel.FATAL, "FTL"),
        (LogLevel.PANIC, "PNC"),
    ],
)
def test_level_texts(level, text):
    assert level.text() == text
    assert level_text(level) == text
    assert level_text(int(level)) == text


@pytest.mark.parametrize(
    "level, color",
    [
        (LogLevel.INFO, GREEN_COLOR),
        (LogLevel.DEBUG, YELLOW_COLOR),
        (LogLevel.WARN, RED_COLOR),
        (LogLevel.ERROR, BOLD_RED_COLOR),
        (LogLevel.FATAL, BOLD_RED_COLOR),
        (LogLevel.PANIC, BOLD_RED_COLOR),
    ],
)
def test_level_colors(level, color):
    assert level.color() == color
    assert level_color(int(level)) == color


def test_colors_start_with_escape_prefix():
    assert COLOR_PREFIX == "\x1b["
    colors = [level_color(level) for level in LogLevel]
    assert len(colors) == 6
    for color in colors:
        assert color.startswith(COLOR_PREFIX)


@pytest.mark.parametrize("bad", [6, -1, 255])
def test_unknown_level_raises(bad):
    with pytest.raises(ValueError):
        level_text(bad)
    with pytest.raises(ValueError):
        level_color(bad)


def test_default_output_is_stderr():
    assert default_output() is sys.stderr
    assert _default_output() is default_output()


def test_log_writer_protocol_recognises_writers():
    class Collector:
        def __init__(self):
            self.seen = []

        def write_log(self, time, level, msg):
            self.seen.append((time, level, msg))

    class NotAWriter:
        pass

    collector = Collector()
    assert isinstance(collector, LogWriter)
    assert not isinstance(NotAWriter(), LogWriter)

    stamp = datetime(2020, 5, 6)
    collector.write_log(stamp, LogLevel.WARN, "m")
    assert collector.seen == [(stamp, LogLevel.WARN, "m")]
    assert [level_text(level) for _, level, _ in collector.seen] == ["WRN"]
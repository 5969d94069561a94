"""Log levels, their labels and colours, and the log writer protocol."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum
from typing import Protocol, TextIO, runtime_checkable

SPACE = " "
END_OF_LINE = "\n"
COLOR_PREFIX = "\x1b["

INFO_LEVEL_TEXT = "INF"
DEBUG_LEVEL_TEXT = "DBG"
WARN_LEVEL_TEXT = "WRN"
ERROR_LEVEL_TEXT = "ERR"
FATAL_LEVEL_TEXT = "FTL"
PANIC_LEVEL_TEXT = "PNC"

REGULAR_COLOR = COLOR_PREFIX + "0m"
GRAY_COLOR = COLOR_PREFIX + "90m"
GREEN_COLOR = COLOR_PREFIX + "32m"
YELLOW_COLOR = COLOR_PREFIX + "33m"
RED_COLOR = COLOR_PREFIX + "31m"
BOLD_RED_COLOR = COLOR_PREFIX + "1m" + RED_COLOR

TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"

FATAL_EXIT_CODE = 1


class LogLevel(IntEnum):
    """Severity of a log message."""

    INFO = 0
    DEBUG = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    PANIC = 5

    def text(self) -> str:
        """Return the short label of the level, such as "INF" or "ERR"."""
        return _LEVEL_TEXTS[self]

    def color(self) -> str:
        """Return the terminal colour code used for the level label."""
        return _LEVEL_COLORS[self]


_LEVEL_TEXTS = {
    LogLevel.INFO: INFO_LEVEL_TEXT,
    LogLevel.DEBUG: DEBUG_LEVEL_TEXT,
    LogLevel.WARN: WARN_LEVEL_TEXT,
    LogLevel.ERROR: ERROR_LEVEL_TEXT,
    LogLevel.FATAL: FATAL_LEVEL_TEXT,
    LogLevel.PANIC: PANIC_LEVEL_TEXT,
}

_LEVEL_COLORS = {
    LogLevel.INFO: GREEN_COLOR,
    LogLevel.DEBUG: YELLOW_COLOR,
    LogLevel.WARN: RED_COLOR,
    LogLevel.ERROR: BOLD_RED_COLOR,
    LogLevel.FATAL: BOLD_RED_COLOR,
    LogLevel.PANIC: BOLD_RED_COLOR,
}


def level_text(level: int) -> str:
    """Return the label of a level; raise ValueError for an unknown level."""
    return LogLevel(level).text()


def level_color(level: int) -> str:
    """Return the colour code of a level; raise ValueError for an unknown level."""
    return LogLevel(level).color()


def default_output() -> TextIO:
    """Return the stream loggers write to by default (standard error)."""
    return sys.stderr


@runtime_checkable
class LogWriter(Protocol):
    """Anything that can receive log messages.

    ``write_log`` raises an exception when the message cannot be written.
    """

    def write_log(self, time: datetime, level: LogLevel, msg: str) -> None:
        """Write one log message."""
        ...
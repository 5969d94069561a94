"""The standard logger: writes formatted, optionally coloured lines to a stream."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, TextIO

from logx.levels import (
    END_OF_LINE,
    GRAY_COLOR,
    REGULAR_COLOR,
    SPACE,
    TIME_FORMAT,
    LogLevel,
    default_output,
)


class Logger:
    """Log writer that prints one line per message to a text stream."""

    def __init__(
        self,
        time_format: str = TIME_FORMAT,
        output: Optional[TextIO] = None,
        colors: bool = True,
    ) -> None:
        self.time_format = time_format
        self.output = output if output is not None else default_output()
        self.colors = colors

    def enable_colors(self) -> None:
        """Turn on terminal colours in written lines."""
        self.colors = True

    def disable_colors(self) -> None:
        """Turn off terminal colours in written lines."""
        self.colors = False

    def format_line(self, time: datetime, level: LogLevel, msg: str) -> str:
        """Return the full line, newline included, for one message."""
        level = LogLevel(level)
        stamp = time.strftime(self.time_format)
        if not self.colors:
            return stamp + SPACE + level.text() + SPACE + msg + END_OF_LINE
        return (
            GRAY_COLOR
            + stamp
            + SPACE
            + level.color()
            + level.text()
            + SPACE
            + REGULAR_COLOR
            + msg
            + END_OF_LINE
        )

    def write_log(self, time: datetime, level: LogLevel, msg: str) -> None:
        """Write the message to the output stream."""
        self.output.write(self.format_line(time, level, msg))
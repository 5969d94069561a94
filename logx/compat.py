"""Functions shaped like a classic print-style logging interface.

They share the standard logger and writers of :mod:`logx.log`.
"""

from __future__ import annotations

from typing import Any, Optional, TextIO

from logx.levels import LogLevel
from logx.log import _dispatch, _state
from logx.logger import Logger


def new(out: TextIO, prefix: str = "", flag: int = 0) -> Logger:
    """Return a new logger writing to ``out``; ``prefix`` and ``flag`` are ignored."""
    return Logger(output=out)


def default() -> Optional[Logger]:
    """Return the standard logger, or ``None`` when it is disabled."""
    return _state.std


def set_output(f: TextIO) -> None:
    """Set the stream of the standard logger; does nothing when it is disabled."""
    if _state.std is None:
        return
    _state.std.output = f


def writer() -> Optional[TextIO]:
    """Return the stream of the standard logger, or ``None`` when it is disabled."""
    if _state.std is None:
        return None
    return _state.std.output


def _sprint(args: tuple) -> str:
    """Join operands, with a space between two operands when neither is a string."""
    pieces = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index and not is_str and not previous_is_str:
            pieces.append(" ")
        pieces.append(str(arg))
        previous_is_str = is_str
    return "".join(pieces)


def _sprintln(args: tuple) -> str:
    return " ".join(str(arg) for arg in args)


def print(*args: Any) -> None:
    """Log the joined operands at info level."""
    _dispatch(LogLevel.INFO, _sprint(args))


def printf(format: str, *args: Any) -> None:
    """Log ``format % args`` at info level."""
    _dispatch(LogLevel.INFO, format % args)


def println(*args: Any) -> None:
    """Log the space-separated operands at info level."""
    _dispatch(LogLevel.INFO, _sprintln(args))


def fatalf(format: str, *args: Any) -> None:
    """Log ``format % args`` at fatal level; the program keeps running."""
    _dispatch(LogLevel.FATAL, format % args)


def fatalln(*args: Any) -> None:
    """Log the space-separated operands at fatal level; the program keeps running."""
    _dispatch(LogLevel.FATAL, _sprintln(args))


def panicf(format: str, *args: Any) -> None:
    """Log ``format % args`` at panic level; nothing is raised."""
    _dispatch(LogLevel.PANIC, format % args)


def panicln(*args: Any) -> None:
    """Log the space-separated operands at panic level; nothing is raised."""
    _dispatch(LogLevel.PANIC, _sprintln(args))
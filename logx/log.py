"""Package-level logging: a standard logger plus any number of log writers."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from logx.config import Config
from logx.levels import (
    END_OF_LINE,
    FATAL_EXIT_CODE,
    SPACE,
    TIME_FORMAT,
    LogLevel,
    LogWriter,
    default_output,
)
from logx.logger import Logger

ERROR_INSERT = ": "


class PanicError(Exception):
    """Raised by :func:`panic` after the message has been logged."""


@dataclass
class _State:
    debug_disabled: bool = False
    warn_disabled: bool = False
    std: Optional[Logger] = field(default_factory=Logger)
    # Most recently added writer first.
    writers: List[LogWriter] = field(default_factory=list)


_state = _State()


def apply_config(cfg: Config) -> None:
    """Apply a configuration; empty fields of ``cfg`` are filled with defaults."""
    cfg.init_empty_fields()

    _state.debug_disabled = cfg.disable_debug_logs
    _state.warn_disabled = cfg.disable_warn_logs

    if cfg.disable_standard_logger:
        _state.std = None
        return

    if _state.std is None:
        _state.std = Logger()

    if cfg.disable_colors:
        _state.std.disable_colors()
    else:
        _state.std.enable_colors()

    _state.std.time_format = cfg.time_format
    _state.std.output = cfg.output


def add_writers(*writers: Optional[LogWriter]) -> None:
    """Add log writers; ``None`` values are ignored."""
    for writer in writers:
        if writer is not None:
            _state.writers.insert(0, writer)


def remove_writers(*writers: Optional[LogWriter]) -> None:
    """Remove one occurrence of each given writer; ``None`` values are ignored."""
    for writer in writers:
        if writer is None:
            continue
        position = next(
            (i for i, stored in enumerate(_state.writers) if stored is writer), None
        )
        if position is not None:
            del _state.writers[position]


def info(msg: str) -> None:
    """Log a message at info level."""
    _dispatch(LogLevel.INFO, msg)


def debug(msg: str) -> None:
    """Log a message at debug level, unless debug logs are disabled."""
    if _state.debug_disabled:
        return
    _dispatch(LogLevel.DEBUG, msg)


def warn(msg: str) -> None:
    """Log a message at warn level, unless warn logs are disabled."""
    if _state.warn_disabled:
        return
    _dispatch(LogLevel.WARN, msg)


def error(desc: str, err: Optional[BaseException] = None) -> None:
    """Log a description, followed by the error if there is one, at error level."""
    _dispatch(LogLevel.ERROR, _with_error(desc, err))


def fatal(desc: str, err: Optional[BaseException] = None) -> None:
    """Log at fatal level, then exit with the fatal exit code."""
    fatal_with_code(desc, err, FATAL_EXIT_CODE)


def fatal_with_code(desc: str, err: Optional[BaseException], exit_code: int) -> None:
    """Log at fatal level, then exit with ``exit_code``."""
    _dispatch(LogLevel.FATAL, _with_error(desc, err))
    raise SystemExit(exit_code)


def panic(desc: str, err: Optional[BaseException] = None) -> None:
    """Log at panic level, then raise :class:`PanicError` with the message."""
    desc = _with_error(desc, err)
    _dispatch(LogLevel.PANIC, desc)
    raise PanicError(desc)


def _with_error(desc: str, err: Optional[BaseException]) -> str:
    return desc if err is None else desc + ERROR_INSERT + str(err)


def _dispatch(level: LogLevel, msg: str) -> None:
    """Send a message to the standard logger and then to every writer."""
    time = datetime.now().astimezone()

    if _state.std is not None:
        with contextlib.suppress(OSError, ValueError):
            _state.std.write_log(time, level, msg)

    if _state.writers:
        _write_by_writers(time, level, msg)


def _write_by_writers(time: datetime, level: LogLevel, msg: str) -> None:
    for writer in list(_state.writers):
        try:
            writer.write_log(time, level, msg)
        except Exception as exc:  # a broken writer must not stop the others
            desc = (
                f"could not write to log writer={type(writer).__qualname__}"
                + ERROR_INSERT
                + str(exc)
            )
            _write_to_stream(time, LogLevel.ERROR, desc)


def _write_to_stream(time: datetime, level: LogLevel, msg: str) -> None:
    line = time.strftime(TIME_FORMAT) + SPACE + level.text() + SPACE + msg + END_OF_LINE
    with contextlib.suppress(OSError, ValueError):
        default_output().write(line)
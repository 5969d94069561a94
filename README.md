# logx

A small levelled logger. Every message goes to a standard logger
(stderr by default, with colored level tags) and is then handed to any
number of log writers you register.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Levels

`logx.levels.LogLevel` is an `IntEnum` with six levels, each with a
short tag and a terminal color:

| Level | Value | Tag   |
|-------|-------|-------|
| INFO  | 0     | `INF` |
| DEBUG | 1     | `DBG` |
| WARN  | 2     | `WRN` |
| ERROR | 3     | `ERR` |
| FATAL | 4     | `FTL` |
| PANIC | 5     | `PNC` |

`LogLevel.text()` and `LogLevel.color()` return the tag and the color
code. `level_text(level)` and `level_color(level)` accept a plain
integer as well and raise `ValueError` for an unknown level.
`default_output()` returns `sys.stderr`.

## Logging

```python
from logx import log

log.info("service started")
log.debug("using stage database")
log.warn("slow request")
log.error("database connection lost", ConnectionResetError("connection reset by peer"))
```

A line looks like this (colors omitted):

```
2024-05-01 12:00:00 +0000 ERR database connection lost: connection reset by peer
```

Timestamps use the local time zone and the `strftime` format
`"%Y-%m-%d %H:%M:%S %z"` (`logx.levels.TIME_FORMAT`).

`error`, `fatal`, `fatal_with_code` and `panic` take a description and
an exception, which may be `None`; when it is given, `": "` and the
exception text are appended to the description. After logging, `fatal`
raises `SystemExit(1)`, `fatal_with_code` raises `SystemExit` with the
code you give, and `panic` raises `logx.log.PanicError` carrying the
message.

If the standard logger's stream fails with `OSError` or `ValueError`
(for example a closed file), the failure is ignored and the writers
still run.

## Configuration

Build a `logx.config.Config` and pass it to `logx.log.apply_config`:

```python
from logx import log
from logx.config import Config

log.apply_config(Config(disable_debug_logs=True, disable_colors=True))
```

Fields:

- `disable_debug_logs` – `debug()` does nothing.
- `disable_warn_logs` – `warn()` does nothing.
- `disable_standard_logger` – no terminal output; only writers receive
  messages. A later configuration without it creates a fresh standard
  logger.
- `disable_colors` – plain lines without color codes.
- `time_format` – `strftime` format; empty means the default.
- `output` – text stream; `None` means stderr.

`Config.init_empty_fields()` fills in the empty time format and output;
`apply_config` calls it for you.

## Log writers

Any object with a `write_log(time, level, msg)` method can receive
messages; `logx.levels.LogWriter` is a runtime-checkable protocol
describing that interface.

```python
from logx import log


class ListWriter:
    def __init__(self):
        self.lines = []

    def write_log(self, time, level, msg):
        self.lines.append(f"{level.text()} {msg}")


collected = ListWriter()
log.add_writers(collected)
log.info("hello")
log.remove_writers(collected)
```

Writers added last are called first. `remove_writers` removes one
occurrence of each writer given, matched by identity. `None` values
passed to `add_writers` or `remove_writers` are ignored. If a writer
raises, the failure is written to stderr as an uncolored `ERR` line
naming the writer's class and the error, and the remaining writers
still run.

## The standard logger

`logx.logger.Logger(time_format, output, colors)` is the writer used for
terminal output; all arguments have defaults (the default time format,
stderr, colors on). Its `time_format`, `output` and `colors` attributes
can be changed directly, colors can also be switched with
`enable_colors()` and `disable_colors()`, and
`format_line(time, level, msg)` returns the exact line, newline
included, that `write_log` writes.

## Familiar printing functions

`logx.compat` offers the shapes of a classic printing logger, routed
through the same standard logger and writers as `logx.log`:

- `print(*args)` – joins operands, putting a space only between two
  operands that are both non-strings; info level.
- `printf(format, *args)` – `format % args`; info level.
- `println(*args)` – operands joined by single spaces; info level.
- `fatalf`, `fatalln` – as above at fatal level; the program keeps
  running.
- `panicf`, `panicln` – as above at panic level; nothing is raised.
- `new(out, prefix, flag)` – a new `Logger` writing to `out`; `prefix`
  and `flag` are ignored.
- `default()`, `writer()`, `set_output(f)` – the standard logger, its
  stream, and a way to change that stream; `default()` and `writer()`
  return `None`, and `set_output` does nothing, while the standard
  logger is disabled.

```python
from logx import compat

compat.printf("%d items processed", 42)
```

## Commands

```
logx-demo
```

Adds and removes writers that print what they receive to stdout, breaks
one of them to show how a failing writer is reported, and ends with a
fatal message and exit code 1.

```
logx-showcase
```

Logs a short series of service-style messages at different levels.

```
logx-benchmarks [--times N] [--message TEXT]
```

Logs the message N times (default 200000) with the standard library's
`logging` module and with `logx`, both to stderr, then prints the time
each took. `logx.benchmarks.run_benchmarks(times, msg)` returns the
results as `(name, seconds)` pairs.

## What it does not do

The package has no prefix or flag options for log lines, no log files,
rotation or filtering by module, and no structured (JSON) output; such
things are up to the log writers you provide. The benchmark compares
only the standard library logger and `logx`.
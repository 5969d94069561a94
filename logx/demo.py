"""Demonstration of log writers being added, removed and failing."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from logx import log
from logx.levels import TIME_FORMAT, LogLevel

RECEIVE_TEMPLATE = "| {} | {} | {} | {} |"


def _receipt(destination: str, time: datetime, level: LogLevel, msg: str) -> str:
    return RECEIVE_TEMPLATE.format(
        destination, time.strftime(TIME_FORMAT), LogLevel(level).text(), msg
    )


class FileWriter:
    """Writer that reports each message it receives, until it is broken."""

    def __init__(self, destination: str) -> None:
        self.destination = destination
        self.err: Optional[Exception] = None

    def write_log(self, time: datetime, level: LogLevel, msg: str) -> None:
        """Print the received message, or raise the stored error."""
        if self.err is not None:
            raise self.err
        print(_receipt(self.destination, time, level, msg))

    def provoke_error(self) -> None:
        """Break the writer so that every later write fails."""
        self.err = OSError("i can't write this log to file")
        print("*** An error is provoken to crash the file writer, ha-ha! ***")


class DatabaseWriter:
    """Writer that reports each message it receives."""

    def __init__(self, destination: str) -> None:
        self.destination = destination

    def write_log(self, time: datetime, level: LogLevel, msg: str) -> None:
        """Print the received message."""
        print(_receipt(self.destination, time, level, msg))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the demonstration; it ends with a fatal log and a SystemExit."""
    file = FileWriter("logs.txt")
    my_sql = DatabaseWriter("MySQL")
    postgre_sql = DatabaseWriter("PostgreSQL")

    try:
        log.add_writers(postgre_sql, my_sql)
        log.info("message")

        log.add_writers(file)
        log.debug("message")

        log.remove_writers(my_sql, file)
        log.warn("message")

        # Break a writer to show how failures are reported.
        file.provoke_error()

        log.remove_writers(postgre_sql)
        log.add_writers(my_sql, file)
        log.error("description", OSError("some error occurred"))

        log.remove_writers(my_sql)
        log.add_writers(postgre_sql, file)
        log.fatal("description", OSError("app crashed, as was planned"))
    finally:
        log.remove_writers(file, postgre_sql, file, my_sql)


if __name__ == "__main__":
    main()
"""Configuration of the package-level logging functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from logx.levels import TIME_FORMAT, default_output


@dataclass
class Config:
    """Settings applied to the package-level logger.

    An empty ``time_format`` and a missing ``output`` stand for the
    defaults, filled in by :meth:`init_empty_fields`.
    """

    disable_debug_logs: bool = False
    disable_warn_logs: bool = False
    disable_standard_logger: bool = False
    disable_colors: bool = False
    time_format: str = ""
    output: Optional[TextIO] = None

    def init_empty_fields(self) -> None:
        """Replace fields left empty with their default values."""
        if not self.time_format:
            self.time_format = TIME_FORMAT
        if self.output is None:
            self.output = default_output()
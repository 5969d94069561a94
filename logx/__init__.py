"""Levelled logging with colored terminal output and pluggable log writers."""

__version__ = "0.1.0"
__all__ = [
    "benchmarks",
    "compat",
    "config",
    "demo",
    "levels",
    "log",
    "logger",
    "showcase",
]
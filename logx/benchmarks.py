"""Timing of the standard library logger against the package logger."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, Sequence, Tuple

from logx import log

MESSAGE = "The quick brown fox jumps over the lazy dog."
TIMES = 200_000


def _stdlib_run(times: int, msg: str) -> None:
    logger = logging.getLogger("logx.benchmarks")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        for _ in range(times):
            logger.info(msg)
    finally:
        logger.removeHandler(handler)


def _logx_run(times: int, msg: str) -> None:
    for _ in range(times):
        log.info(msg)


def run_benchmarks(times: int = TIMES, msg: str = MESSAGE) -> List[Tuple[str, float]]:
    """Log ``msg`` ``times`` times with each logger; return (name, seconds) pairs."""
    tests: List[Tuple[str, Callable[[int, str], None]]] = [
        ("log", _stdlib_run),
        ("logx", _logx_run),
    ]
    results = []
    for name, run in tests:
        start = time.perf_counter()
        run(times, msg)
        results.append((name, time.perf_counter() - start))
    return results


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the benchmarks and print the time taken by each logger."""
    parser = argparse.ArgumentParser(description="Compare logger speeds.")
    parser.add_argument("--times", type=int, default=TIMES)
    parser.add_argument("--message", default=MESSAGE)
    args = parser.parse_args(argv)

    results = run_benchmarks(args.times, args.message)

    print("Time Results")
    for name, seconds in results:
        print(f"{name:>7}: {seconds:.6f}s")


if __name__ == "__main__":
    main()
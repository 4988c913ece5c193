"""Performance measurement helpers."""
import logging
import time
from contextlib import contextmanager
from typing import Optional, Union

import psutil

_default_logger = logging.getLogger(__name__)


@contextmanager
def timing_context(label: str, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None):
    """Log the wall-clock time spent inside the block.

    Yields a dict whose ``elapsed`` key is filled in on exit.
    """
    log = logger or _default_logger
    timing = {"elapsed": 0.0}
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing["elapsed"] = time.perf_counter() - start
        log.info(f"{label}: {timing['elapsed'] * 1000:.2f} ms")


@contextmanager
def memory_profiler(label: str, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None):
    """Log the resident set size change across the block."""
    log = logger or _default_logger
    process = psutil.Process()
    usage = {"rss_before": process.memory_info().rss, "rss_delta": 0}
    try:
        yield usage
    finally:
        rss_after = process.memory_info().rss
        usage["rss_delta"] = rss_after - usage["rss_before"]
        log.info(
            f"{label}: RSS {rss_after / 1024**2:.1f} MB "
            f"(delta {usage['rss_delta'] / 1024:+.1f} KB)"
        )

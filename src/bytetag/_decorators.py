"""Reusable decorators for pipeline utilities."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(func: Callable) -> Callable:
    """Log how long the wrapped callable ran, and whether it failed."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        failed = True
        try:
            result = func(*args, **kwargs)
            failed = False
            return result
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if failed:
                log.info(f"{func.__name__} failed after {elapsed_ms:.2f} ms")
            else:
                log.info(f"{func.__name__} completed in {elapsed_ms:.2f} ms")

    return wrapper

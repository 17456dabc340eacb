"""
Logging decorators for public sort and pagination operations.
"""
from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable

from queryable_extensions.errors.exceptions import QueryableExtensionsError

log = logging.getLogger("queryable.ext")


def operation_logger(operation: str) -> Callable:
    """
    Decorator that wraps a library operation with logging and timing.

    Logs start/end at DEBUG with the execution duration. Caller configuration mistakes
    (library errors) are logged at WARNING; anything else is logged with its traceback.
    The exception is always re-raised unchanged.

    Args:
        operation: Name of the operation being wrapped (for log messages)

    Returns:
        Decorator function that wraps synchronous functions
    """
    def _wrap(fn):
        @wraps(fn)
        def _wrapper(*args, **kwargs):
            start = time.perf_counter()
            log.debug("Operation start", extra={"operation": operation})
            try:
                result = fn(*args, **kwargs)
            except QueryableExtensionsError as exc:
                dur_ms = round((time.perf_counter() - start) * 1000, 2)
                log.warning("Operation rejected after %.2fms: %s", dur_ms, exc.details,
                            extra={"operation": operation, "error_type": exc.error_type,
                                   "duration_ms": dur_ms})
                raise
            except Exception:
                dur_ms = round((time.perf_counter() - start) * 1000, 2)
                log.exception("Operation error after %.2fms", dur_ms,
                              extra={"operation": operation, "duration_ms": dur_ms})
                raise
            dur_ms = round((time.perf_counter() - start) * 1000, 2)
            log.debug("Operation done in %.2fms", dur_ms,
                      extra={"operation": operation, "duration_ms": dur_ms})
            return result
        return _wrapper
    return _wrap

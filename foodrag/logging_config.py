"""Logging and observability utilities: structured logging and latency tracking."""

import inspect
import logging
import time
from functools import wraps
from typing import Callable, Optional, Tuple, Type, Union


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def log_latency(operation_name: str, expected: Tuple[Type[Exception], ...] = ()):
    """Log the latency and outcome of a call.

    Exceptions listed in ``expected`` are client errors: logged at WARNING with
    ``status=rejected``. Anything else is logged at ERROR. Both are re-raised.
    """

    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        def _report(start: float, error: Optional[Exception] = None):
            latency_ms = (time.perf_counter() - start) * 1000
            prefix = f"{operation_name} | latency_ms={latency_ms:.2f}"
            if error is None:
                logger.info(f"{prefix} | status=success")
            elif isinstance(error, expected):
                logger.warning(f"{prefix} | status=rejected | error={error}")
            else:
                logger.error(f"{prefix} | status=error | error={error}")

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _report(start, e)
                raise
            _report(start)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _report(start, e)
                raise
            _report(start)
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


class QueryMetrics:
    """Per-process query counters. Rejected queries are excluded from the latency average."""

    def __init__(self):
        self.total_queries = 0
        self.successful_queries = 0
        self.failed_queries = 0
        self.rejected_queries = 0
        self.total_latency_ms = 0.0

    def record_rejected(self):
        self.total_queries += 1
        self.rejected_queries += 1

    def record_query(self, success: bool, latency_ms: float):
        self.total_queries += 1
        self.total_latency_ms += latency_ms

        if success:
            self.successful_queries += 1
        else:
            self.failed_queries += 1

    def get_stats(self) -> dict:
        timed = self.successful_queries + self.failed_queries
        avg_latency = self.total_latency_ms / timed if timed > 0 else 0
        return {
            "total_queries": self.total_queries,
            "successful_queries": self.successful_queries,
            "failed_queries": self.failed_queries,
            "rejected_queries": self.rejected_queries,
            "avg_latency_ms": round(avg_latency, 2),
        }

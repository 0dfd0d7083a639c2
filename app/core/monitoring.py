"""
Request and database instrumentation.

``PerformanceMiddleware`` counts requests and records response times per
path; ``monitor_database`` / ``monitor_database_async`` wrap a single store
operation with a timer and success/error counters.
"""

import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from starlette.middleware.base import BaseHTTPMiddleware

from app.core.metrics import MetricsRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SLOW_REQUEST_THRESHOLD_MS = 1000


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Emit request counters, response-time gauges and status counters."""

    def __init__(self, app, slow_request_threshold_ms: int = DEFAULT_SLOW_REQUEST_THRESHOLD_MS):
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms

    async def dispatch(self, request, call_next):
        registry: MetricsRegistry = request.app.state.metrics
        path = request.url.path or "unknown"
        start = time.perf_counter()

        registry.increment(f"requests_total_{path}")
        registry.increment("requests_total")

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self._on_finish(registry, path, start, status_code)

    def _on_finish(self, registry: MetricsRegistry, path: str, start: float, status_code: int) -> None:
        duration_ms = (time.perf_counter() - start) * 1000.0
        registry.gauge(f"response_time_{path}", duration_ms)
        # last observed value, not a mean
        registry.gauge("response_time_avg", duration_ms)

        if duration_ms > self.slow_request_threshold_ms:
            logger.warning(
                f"Slow request detected: {path} took {duration_ms:.0f}ms",
                extra={"path": path, "duration_ms": duration_ms},
            )

        registry.increment(f"status_{status_code}")


def monitor_database(
    registry: MetricsRegistry,
    operation: str,
    fn: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T:
    """
    Run ``fn`` as store operation ``operation``.

    Records ``db_{operation}_duration_ms`` and one of
    ``db_{operation}_success`` / ``db_{operation}_error``. Failures are
    logged and re-raised unchanged.
    """
    timer = f"db_{operation}"
    registry.start_timer(timer)
    try:
        result = fn(*args, **kwargs)
        registry.increment(f"{timer}_success")
        return result
    except Exception as e:
        registry.increment(f"{timer}_error")
        logger.error(f"Database error in {operation}: {e}", exc_info=True)
        raise
    finally:
        registry.end_timer(timer)


async def monitor_database_async(
    registry: MetricsRegistry,
    operation: str,
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    **kwargs: Any,
) -> T:
    """Awaitable counterpart of :func:`monitor_database`."""
    timer = f"db_{operation}"
    registry.start_timer(timer)
    try:
        result = await fn(*args, **kwargs)
        registry.increment(f"{timer}_success")
        return result
    except Exception as e:
        registry.increment(f"{timer}_error")
        logger.error(f"Database error in {operation}: {e}", exc_info=True)
        raise
    finally:
        registry.end_timer(timer)

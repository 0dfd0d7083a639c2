"""In-process metrics registry.

Counters and gauges live in one name -> number map; the two kinds are not
distinguished once written. Timers are kept separately as name -> start
timestamp (epoch milliseconds) and turn into a ``{name}_duration_ms`` gauge
when ended.

Values are diagnostic only: nothing is persisted and a restart loses them.
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional, Union

Number = Union[int, float]

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.time() * 1000.0


class MetricsRegistry:
    """Owned registry of counters, gauges and pending timers.

    One instance is created per application and handed to whoever records
    metrics. ``log`` can be any object exposing ``info``/``warning``/``error``.
    """

    def __init__(self, log=None, clock: Callable[[], float] = _now_ms):
        self._metrics: Dict[str, Number] = {}
        self._timers: Dict[str, float] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self.log = log or logger

    def increment(self, name: str, amount: Number = 1) -> Number:
        """Add ``amount`` to counter ``name`` (missing counters start at 0)."""
        with self._lock:
            total = self._metrics.get(name, 0) + amount
            self._metrics[name] = total
        self.log.info(f"Metric incremented: {name} = {total}")
        return total

    def gauge(self, name: str, value: Number) -> None:
        """Overwrite ``name`` with ``value``."""
        with self._lock:
            self._metrics[name] = value
        self.log.info(f"Metric gauge set: {name} = {value}")

    def start_timer(self, name: str) -> None:
        # last start wins
        with self._lock:
            self._timers[name] = self._clock()

    def end_timer(self, name: str) -> Optional[float]:
        """Record the elapsed time for ``name`` as ``{name}_duration_ms``.

        Returns the duration, or None when no timer was started under that
        name (nothing is recorded in that case).
        """
        with self._lock:
            start = self._timers.pop(name, None)
        if start is None:
            return None
        duration = max(self._clock() - start, 0.0)
        self.gauge(f"{name}_duration_ms", duration)
        self.log.info(f"Timer completed: {name} took {duration:.0f}ms")
        return duration

    @contextmanager
    def time_block(self, name: str):
        self.start_timer(name)
        try:
            yield
        finally:
            self.end_timer(name)

    def get_metrics(self) -> Dict[str, Number]:
        """Snapshot of all counters and gauges."""
        with self._lock:
            return dict(self._metrics)

    def pending_timers(self) -> List[str]:
        with self._lock:
            return sorted(self._timers)

    def reset(self) -> None:
        """Clear every metric and timer (for testing)."""
        with self._lock:
            self._metrics.clear()
            self._timers.clear()

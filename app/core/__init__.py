"""
Core building blocks for the Meo Stationery backend.
Provides the metrics registry, request/database instrumentation and event tracking.
"""

from .metrics import MetricsRegistry
from .monitoring import PerformanceMiddleware, monitor_database, monitor_database_async
from .tracking import CartAction, track_order, track_product_view, track_cart_action

__all__ = [
    "MetricsRegistry",
    "PerformanceMiddleware",
    "monitor_database",
    "monitor_database_async",
    "CartAction",
    "track_order",
    "track_product_view",
    "track_cart_action",
]

"""Business event tracking on top of the metrics registry."""
import logging
from enum import Enum
from typing import Union

from app.core.metrics import MetricsRegistry, Number

logger = logging.getLogger(__name__)


class CartAction(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    CHECKOUT = "checkout"


def track_order(registry: MetricsRegistry, order_value: Number) -> None:
    registry.increment("orders_total")
    registry.increment("revenue_total", order_value)
    # latest order value only; this is not a running mean
    registry.gauge("avg_order_value", order_value)
    logger.info(f"Order tracked: {order_value}", extra={"order_value": order_value})


def track_product_view(registry: MetricsRegistry, product_id: str) -> None:
    registry.increment(f"product_views_{product_id}")
    registry.increment("product_views_total")


def track_cart_action(registry: MetricsRegistry, action: Union[CartAction, str]) -> None:
    """Count a cart action. Raises ValueError for actions outside CartAction."""
    action = CartAction(action)
    registry.increment(f"cart_{action.value}")
    logger.info(f"Cart action tracked: {action.value}")

"""
Business event tracking endpoints
"""
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_metrics_registry
from app.core.metrics import MetricsRegistry
from app.core.tracking import track_cart_action, track_order
from app.schemas.base import Envelope
from app.schemas.tracking import CartEvent, OrderEvent, TrackedEvent

router = APIRouter(prefix="/api/track", tags=["tracking"])


@router.post("/order", response_model=Envelope[TrackedEvent], status_code=status.HTTP_202_ACCEPTED)
def record_order(event: OrderEvent, metrics: MetricsRegistry = Depends(get_metrics_registry)):
    """
    Record a placed order

    - **value**: order value in the smallest currency unit
    """
    track_order(metrics, event.value)
    return Envelope(status="ok", data=TrackedEvent(event="order"))


@router.post("/cart", response_model=Envelope[TrackedEvent], status_code=status.HTTP_202_ACCEPTED)
def record_cart_action(event: CartEvent, metrics: MetricsRegistry = Depends(get_metrics_registry)):
    """
    Record a cart action

    - **action**: add, remove or checkout
    """
    track_cart_action(metrics, event.action)
    return Envelope(status="ok", data=TrackedEvent(event=f"cart_{event.action.value}"))

"""
Metrics endpoint for observability and monitoring.
"""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_metrics_registry
from app.core.metrics import MetricsRegistry
from app.models.api_models import MetricsSnapshotResponse

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics", response_model=MetricsSnapshotResponse)
async def get_metrics(metrics: MetricsRegistry = Depends(get_metrics_registry)):
    """Current counters, gauges and timers still running."""
    return MetricsSnapshotResponse(
        metrics=metrics.get_metrics(),
        pending_timers=metrics.pending_timers(),
    )

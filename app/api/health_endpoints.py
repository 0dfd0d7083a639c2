"""
Health check endpoint.

GET /api/health reports a fixed-shape status document. Database and object
store entries are reported as configured values; nothing is probed.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from app.config.settings import Settings
from app.core.dependencies import get_app_settings, get_request_id
from app.models.api_models import HealthCheckResponse, HealthErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


def build_health_document(settings: Settings) -> HealthCheckResponse:
    return HealthCheckResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.reported_environment,
        database="connected",
        s3="configured",
    )


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    responses={500: {"model": HealthErrorResponse}},
    summary="Basic health check",
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    request_id: str = Depends(get_request_id),
):
    """
    Report service status, version and environment.

    Returns 200 with the status document, or 500 with
    ``{status: "unhealthy", error, timestamp}`` if building it fails.
    """
    try:
        health = build_health_document(settings)
    except Exception as e:
        logger.error(
            f"Health check endpoint failed: {e}",
            extra={'request_id': request_id},
            exc_info=True
        )
        error = HealthErrorResponse(error=str(e) or "Unknown error")
        return JSONResponse(status_code=500, content=error.model_dump())

    return JSONResponse(status_code=200, content=health.model_dump())

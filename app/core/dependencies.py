"""
Dependency providers for FastAPI.

Shared objects (settings, metrics registry, database, image resolver) are
created once in ``create_app`` and stored on ``app.state``; these providers
hand them to request handlers.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config.settings import Settings
from app.core.db import get_db
from app.core.metrics import MetricsRegistry
from app.services.image_service import ImageUrlResolver
from app.services.product_service import ProductService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_metrics_registry(request: Request) -> MetricsRegistry:
    return request.app.state.metrics


def get_image_resolver(request: Request) -> ImageUrlResolver:
    return request.app.state.image_resolver


def get_request_id(request: Request) -> str:
    return getattr(request.state, 'request_id', 'unknown')


def get_product_service(
    db: Session = Depends(get_db),
    metrics: MetricsRegistry = Depends(get_metrics_registry),
) -> ProductService:
    return ProductService(db, metrics)

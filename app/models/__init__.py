"""
Models package for the Meo Stationery backend.

ORM models for the relational store and Pydantic models for API responses.
"""

# ORM Models
from .product import Product

# API Models
from .api_models import (
    HealthCheckResponse,
    HealthErrorResponse,
    MetricsSnapshotResponse,
    StandardErrorResponse,
    utc_timestamp,
)

__all__ = [
    "Product",
    "HealthCheckResponse",
    "HealthErrorResponse",
    "MetricsSnapshotResponse",
    "StandardErrorResponse",
    "utc_timestamp",
]

"""
API response models for the Meo Stationery backend.

Health, metrics and error payloads returned by the HTTP layer.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict, Any, Union
from datetime import datetime, timezone
import uuid


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthCheckResponse(BaseModel):
    """Response model for the health check endpoint"""
    status: str = Field(description="Overall status: healthy or unhealthy")
    timestamp: str = Field(default_factory=utc_timestamp)
    service: str
    version: str
    environment: str
    database: str = Field(description="Database status as reported, not probed")
    s3: str = Field(description="Object store status as reported, not probed")

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        valid_statuses = {"healthy", "unhealthy"}
        if v not in valid_statuses:
            raise ValueError(f"status must be one of: {valid_statuses}")
        return v


class HealthErrorResponse(BaseModel):
    """Body returned when the health check itself fails"""
    status: str = "unhealthy"
    error: str
    timestamp: str = Field(default_factory=utc_timestamp)


class MetricsSnapshotResponse(BaseModel):
    metrics: Dict[str, Union[int, float]]
    pending_timers: List[str] = Field(default_factory=list)


class StandardErrorResponse(BaseModel):
    """Standardized error response format"""
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('error_code')
    @classmethod
    def validate_error_code(cls, v):
        if not v or not v.isupper():
            raise ValueError("error_code must be a non-empty uppercase string")
        return v

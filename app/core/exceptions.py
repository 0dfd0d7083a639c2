"""
Custom exceptions for the Meo Stationery backend.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Catalog errors
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"

    # Store errors
    SEED_FAILED = "SEED_FAILED"

    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class StorefrontException(Exception):
    """Base exception for the storefront backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ProductNotFoundError(StorefrontException):
    """Raised when a product id does not exist in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product {product_id} not found",
            error_code=ErrorCode.PRODUCT_NOT_FOUND,
            details={"product_id": product_id},
            status_code=404
        )


class SeedError(StorefrontException):
    """Raised when the catalog seed run fails partway."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.SEED_FAILED,
            details=details,
            status_code=500
        )

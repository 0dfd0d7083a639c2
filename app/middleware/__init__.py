"""
Middleware package for FastAPI application.
"""

from .request_context import RequestContextMiddleware, REQUEST_ID_HEADER

__all__ = ["RequestContextMiddleware", "REQUEST_ID_HEADER"]

# API endpoints and routers

from .health_endpoints import router as health_router
from .metrics_endpoints import router as metrics_router
from .products_endpoints import router as products_router
from .tracking_endpoints import router as tracking_router

__all__ = [
    "health_router",
    "metrics_router",
    "products_router",
    "tracking_router",
]

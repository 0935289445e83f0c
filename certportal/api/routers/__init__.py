"""API routers."""

from .companies import router as companies_router
from .health import router as health_router

__all__ = [
    "companies_router",
    "health_router",
]

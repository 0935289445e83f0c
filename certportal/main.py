"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, certportal.api, certportal.observability, certportal.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from certportal import __version__
from certportal.api import api_router
from certportal.api.deps import get_service_cache
from certportal.configs import get_settings
from certportal.observability.logger import configure_logging
from certportal.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-warms the storage client. Missing storage
    credentials are reported per request as config_error, so startup only
    warns about them.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    if not settings.storage.is_configured:
        logger.warning(
            "Storage credentials missing; listings will fail with config_error",
            extra={"environment": settings.environment},
        )
    elif cache.storage_client is None:
        logger.warning("Storage client unavailable; listings will fail with config_error")
    else:
        logger.info("Service cache pre-warmed")

    yield

    cache.clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Certificados Tributarios API",
        description="Consulta de certificados tributarios por NIT",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = innermost; correlation ID must wrap request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "certportal.main:app",
        host="0.0.0.0",
        port=8000,
    )

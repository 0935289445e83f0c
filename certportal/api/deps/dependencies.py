"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: certportal.configs, certportal.application, certportal.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache

from botocore.exceptions import BotoCoreError
from fastapi import Depends

from certportal.application.services import ListingService
from certportal.boundary.storage.blob_client import BlobStorageClient
from certportal.configs import Settings, get_settings

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._storage_client = None

    @property
    def storage_client(self) -> BlobStorageClient | None:
        """Get cached storage client, or None when credentials are missing."""
        if self._storage_client is None:
            settings = get_settings()
            if not settings.storage.is_configured:
                return None
            try:
                self._storage_client = BlobStorageClient.from_settings(settings.storage)
            except (ValueError, BotoCoreError) as e:
                # Unusable settings (e.g. malformed endpoint) are a config fault
                logger.error(
                    "Storage client could not be built",
                    extra={
                        "endpoint_url": settings.storage.endpoint_url,
                        "error_type": type(e).__name__,
                        "error": str(e),
                    },
                )
                return None
            logger.info(
                "Storage client initialized",
                extra={"container": settings.storage.container},
            )
        return self._storage_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._storage_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_storage_client() -> BlobStorageClient | None:
    """
    Get the shared storage client.

    Returns:
        BlobStorageClient | None: Client for the certificates container,
        None when the deployment has no storage credentials
    """
    return get_service_cache().storage_client


def get_listing_service(
    settings: Settings = Depends(get_settings_dependency),
    storage_client: BlobStorageClient | None = Depends(get_storage_client),
) -> ListingService:
    """
    Get listing service instance.

    Args:
        settings: Application settings (injected)
        storage_client: Shared storage client (injected)

    Returns:
        ListingService: Listing service bound to the shared storage client
    """
    return ListingService(
        storage_client=storage_client,
        timeout_seconds=settings.storage.timeout_seconds,
        expose_details=not settings.is_production,
    )

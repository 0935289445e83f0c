"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_listing_service,
    get_service_cache,
    get_settings_dependency,
    get_storage_client,
)

__all__ = [
    "get_listing_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_storage_client",
]

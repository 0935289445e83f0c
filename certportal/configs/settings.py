"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from certportal.configs.base import BaseSettings
from certportal.configs.portal import PortalSettings
from certportal.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    portal: PortalSettings = Field(default_factory=PortalSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from certportal.configs import get_settings
        settings = get_settings()
    """
    return Settings()

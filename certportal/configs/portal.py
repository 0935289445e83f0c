"""
Portal (presentation adapter) configuration.

Dependencies: pydantic_settings
System role: Settings for the HTTP client consuming the listing API
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortalSettings(BaseSettings):
    """Settings for the presentation adapter."""

    model_config = SettingsConfigDict(
        env_prefix="PORTAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the listing API",
    )
    request_timeout: float = Field(
        default=15.0,
        description="Timeout in seconds for calls to the listing API",
    )

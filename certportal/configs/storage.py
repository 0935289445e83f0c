"""
Object storage configuration.

Credentials and container settings for the certificates bucket.

Dependencies: pydantic_settings
System role: Object store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for the certificate object store."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    access_key_id: str | None = Field(
        default=None,
        description="Account identity used to reach the object store",
    )
    secret_access_key: str | None = Field(
        default=None,
        description="Access credential paired with the account identity",
    )
    region: str = Field(
        default="us-east-1",
        description="Region of the object store",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible stores",
    )
    container: str = Field(
        default="certificadostributarios",
        description="Container (bucket) holding every certificate, partitioned by NIT",
    )
    url_expiry: int = Field(
        default=3600,
        description="Validity of document access URLs in seconds",
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for a single listing call against the store",
    )

    @property
    def is_configured(self) -> bool:
        """Both secrets are present."""
        return bool(self.access_key_id) and bool(self.secret_access_key)

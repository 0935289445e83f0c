"""
Object storage client for the certificates container.

Enumerates stored objects under a key prefix and builds signed, read-only
access URLs for them. Translates SDK failures into the portal's storage
exceptions so callers never see raw botocore errors.

Dependencies: boto3, botocore
System role: Read-only object store access for document listing
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectionError as BotoConnectionError,
    NoCredentialsError,
    PartialCredentialsError,
    ReadTimeoutError,
)

from certportal.configs.storage import StorageSettings
from certportal.core.exceptions import (
    StorageAccessDeniedError,
    StorageConfigurationError,
    StorageError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AllAccessDisabled",
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
    "AuthorizationFailure",
}


@dataclass(frozen=True)
class StoredObject:
    """An object as reported by the store. Missing attributes stay None."""

    key: str
    size: int | None = None
    content_type: str | None = None
    created_at: datetime | None = None


class BlobStorageClient:
    """Read-only client for the certificates container."""

    def __init__(
        self,
        container: str,
        region: str = "us-east-1",
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        endpoint_url: str | None = None,
        timeout_seconds: float = 10.0,
        url_expiry: int = 3600,
        s3_client: Any | None = None,
    ) -> None:
        """
        Initialize the storage client.

        Args:
            container: Bucket holding every certificate
            region: Region of the object store
            access_key_id: Account identity
            secret_access_key: Access credential
            endpoint_url: Custom endpoint for S3-compatible stores
            timeout_seconds: Connect and read timeout for SDK calls
            url_expiry: Validity of generated access URLs in seconds
            s3_client: Pre-built boto3 client (tests)
        """
        self._container = container
        self._url_expiry = url_expiry
        if s3_client is None:
            s3_client = boto3.client(
                "s3",
                region_name=region,
                endpoint_url=endpoint_url,
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key,
                config=Config(
                    connect_timeout=timeout_seconds,
                    read_timeout=timeout_seconds,
                    retries={"mode": "standard", "max_attempts": 1},
                ),
            )
        self._s3_client = s3_client

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "BlobStorageClient":
        """Build a client from storage settings."""
        return cls(
            container=settings.container,
            region=settings.region,
            access_key_id=settings.access_key_id,
            secret_access_key=settings.secret_access_key,
            endpoint_url=settings.endpoint_url,
            timeout_seconds=settings.timeout_seconds,
            url_expiry=settings.url_expiry,
        )

    @property
    def container(self) -> str:
        return self._container

    def list_objects(self, prefix: str = "") -> list[StoredObject]:
        """
        Enumerate stored objects whose key starts with prefix.

        Objects are returned in the order the store lists them.

        Args:
            prefix: Key prefix; empty string lists the whole container

        Returns:
            list[StoredObject]: Every matching object

        Raises:
            StorageUnavailableError: Store unreachable or timed out
            StorageAccessDeniedError: Store rejected the credentials
            StorageConfigurationError: SDK found no usable credentials
            StorageError: Any other store failure
        """
        objects: list[StoredObject] = []
        try:
            paginator = self._s3_client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._container, Prefix=prefix):
                for item in page.get("Contents", []):
                    objects.append(
                        StoredObject(
                            key=item["Key"],
                            size=item.get("Size"),
                            content_type=item.get("ContentType"),
                            created_at=item.get("LastModified"),
                        )
                    )
        except Exception as e:
            raise self._translate_error(e, "list") from e

        logger.debug(
            "Listed stored objects",
            extra={"container": self._container, "prefix": prefix, "object_count": len(objects)},
        )
        return objects

    def build_access_url(self, key: str) -> str:
        """
        Generate a signed, read-only URL for an object.

        Args:
            key: Full object key, including the NIT folder

        Returns:
            str: Object URL with the read credential in its query string
        """
        try:
            return self._s3_client.generate_presigned_url(
                ClientMethod="get_object",
                Params={"Bucket": self._container, "Key": key},
                ExpiresIn=self._url_expiry,
            )
        except Exception as e:
            raise self._translate_error(e, "sign") from e

    def _translate_error(self, exc: Exception, operation: str) -> StorageError:
        """Map an SDK exception to the storage exception hierarchy."""
        details = {"container": self._container, "error_type": type(exc).__name__}

        if isinstance(exc, (BotoConnectionError, ReadTimeoutError, ConnectionClosedError)):
            return StorageUnavailableError(str(exc), operation, details)

        if isinstance(exc, (NoCredentialsError, PartialCredentialsError)):
            return StorageConfigurationError(str(exc), operation, details)

        if isinstance(exc, ClientError):
            error_code = exc.response.get("Error", {}).get("Code", "Unknown")
            status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            details["error_code"] = error_code
            if status == 403 or error_code in ACCESS_DENIED_CODES:
                return StorageAccessDeniedError(str(exc), operation, details)

        return StorageError(str(exc), operation, details)

"""
Shared test fixtures and configuration for entire test suite.

Provides: storage client stubs and mocks, settings isolation, sample objects
Dependencies: pytest, boto3, botocore
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.stub import Stubber

from certportal.boundary.storage.blob_client import BlobStorageClient, StoredObject
from certportal.api.deps import get_service_cache, get_settings_dependency
from certportal.configs import get_settings

CONTAINER = "certificadostributarios"
IDENTIFIER = "90012345"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop storage/portal environment and the cached settings around each test."""
    for name in (
        "STORAGE_ACCESS_KEY_ID",
        "STORAGE_SECRET_ACCESS_KEY",
        "STORAGE_ENDPOINT_URL",
        "STORAGE_CONTAINER",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_settings_dependency.cache_clear()
    get_service_cache().clear()
    yield
    get_settings.cache_clear()
    get_settings_dependency.cache_clear()
    get_service_cache().clear()


@pytest.fixture
def s3_client():
    """Real boto3 S3 client with dummy credentials (no network when stubbed)."""
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(s3_client):
    """
    Activate a botocore Stubber on the S3 client.

    Yields:
        Stubber: Stubber whose queued responses must all be consumed
    """
    with Stubber(s3_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def blob_client(s3_client) -> BlobStorageClient:
    """BlobStorageClient bound to the stubbed S3 client."""
    return BlobStorageClient(container=CONTAINER, s3_client=s3_client)


@pytest.fixture
def mock_storage_client():
    """
    Create mock BlobStorageClient.

    Returns:
        MagicMock: list_objects returns nothing by default; access URLs are
        deterministic
    """
    client = MagicMock(spec=BlobStorageClient)
    client.container = CONTAINER
    client.list_objects.return_value = []
    client.build_access_url.side_effect = (
        lambda key: f"https://store.example/{CONTAINER}/{key}?sig=test"
    )
    return client


@pytest.fixture
def created_on() -> datetime:
    return datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_objects(created_on) -> list[StoredObject]:
    """Two objects for IDENTIFIER and one in another folder."""
    return [
        StoredObject(key=f"{IDENTIFIER}/a.pdf", size=2048, content_type="application/pdf", created_at=created_on),
        StoredObject(key=f"{IDENTIFIER}/b.pdf", size=None, content_type=None, created_at=None),
        StoredObject(key="other/c.pdf", size=10, content_type="application/pdf", created_at=created_on),
    ]

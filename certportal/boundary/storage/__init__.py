"""Object storage boundary."""

from certportal.boundary.storage.blob_client import BlobStorageClient, StoredObject

__all__ = ["BlobStorageClient", "StoredObject"]

"""
Document listing service.

Validates a company identifier, enumerates its folder in the certificates
container and maps every stored object into a document descriptor. Every
failure is classified into the fixed error taxonomy here, so nothing above
this layer ever handles a storage exception.

Dependencies: certportal.boundary.storage, certportal.core, certportal.models
System role: Listing orchestration and failure classification
"""

import asyncio
import logging

from certportal.boundary.storage.blob_client import BlobStorageClient, StoredObject
from certportal.core.errors import ErrorType
from certportal.core.exceptions import CertPortalException, InvalidIdentifierError
from certportal.core.identifier import folder_prefix, is_valid_identifier
from certportal.models.document import (
    DocumentDescriptor,
    ListingError,
    ListingResult,
    ListingSuccess,
)
from certportal.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONFIG_MISSING_MESSAGE = "Error de configuración del servidor"

# User-facing messages per storage failure category
STORAGE_FAILURE_MESSAGES = {
    ErrorType.NETWORK_ERROR: "No se pudo conectar con el almacenamiento de documentos",
    ErrorType.CONFIG_ERROR: "Sin permisos para acceder al almacenamiento",
    ErrorType.SERVER_ERROR: "Error interno del servidor al obtener los documentos",
}


class ListingService:
    """
    Lists the certificate documents of a company.

    Holds a long-lived storage client; the client is None when the
    deployment lacks storage credentials.
    """

    def __init__(
        self,
        storage_client: BlobStorageClient | None,
        timeout_seconds: float = 10.0,
        expose_details: bool = False,
    ) -> None:
        """
        Initialize listing service.

        Args:
            storage_client: Configured storage client, or None when unconfigured
            timeout_seconds: Upper bound for one enumeration
            expose_details: Include underlying failure text in errors (non-production)
        """
        self.storage_client = storage_client
        self.timeout_seconds = timeout_seconds
        self.expose_details = expose_details

    async def list_documents(self, identifier: str) -> ListingResult:
        """
        List every document stored under an identifier's folder.

        Args:
            identifier: Raw NIT as received from the caller

        Returns:
            ListingSuccess with at least one document, or a ListingError
            classified as invalid_identifier, not_found, network_error,
            config_error or server_error

        Note:
            The timeout abandons the worker thread rather than stopping it;
            a late enumeration finishes in the background and is discarded.
            Each storage call is still bounded by the botocore timeouts.
        """
        if not is_valid_identifier(identifier):
            error = InvalidIdentifierError(identifier)
            logger.warning("Rejected invalid identifier", extra={"identifier": identifier})
            return ListingError(
                type=error.error_type,
                message=error.message,
                identifier=identifier,
                status_code=error.status_code,
            )

        if self.storage_client is None:
            logger.error(
                "Storage credentials are not configured",
                extra={"identifier": identifier},
            )
            return ListingError(
                type=ErrorType.CONFIG_ERROR,
                message=CONFIG_MISSING_MESSAGE,
                identifier=identifier,
                status_code=500,
            )

        logger.info(
            "Listing documents",
            extra={"identifier": identifier, "container": self.storage_client.container},
        )

        try:
            documents = await asyncio.wait_for(
                asyncio.to_thread(self._collect_documents, identifier),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            log_exception_with_context(
                logger, "Document listing timed out", e,
                identifier=identifier, timeout_seconds=self.timeout_seconds,
            )
            return self._failure(
                identifier,
                ErrorType.NETWORK_ERROR,
                503,
                f"Timed out after {self.timeout_seconds}s",
            )
        except CertPortalException as e:
            log_exception_with_context(
                logger, "Failed to list documents", e,
                identifier=identifier, details=e.details,
            )
            return self._failure(identifier, e.error_type, e.status_code, e.message)
        except Exception as e:
            log_exception_with_context(
                logger, "Unexpected failure while listing documents", e,
                identifier=identifier,
            )
            return self._failure(identifier, ErrorType.SERVER_ERROR, 500, str(e))

        if not documents:
            logger.info("No documents found", extra={"identifier": identifier})
            return ListingError(
                type=ErrorType.NOT_FOUND,
                message=f"No se encontraron documentos para el NIT {identifier}",
                identifier=identifier,
                status_code=404,
            )

        logger.info(
            "Documents listed",
            extra={"identifier": identifier, "document_count": len(documents)},
        )
        return ListingSuccess(
            identifier=identifier,
            documents=documents,
            count=len(documents),
            message=f"Se encontraron {len(documents)} documento(s) para el NIT {identifier}",
        )

    def _collect_documents(self, identifier: str) -> list[DocumentDescriptor]:
        """Enumerate the identifier's folder and build descriptors (blocking)."""
        prefix = folder_prefix(identifier)
        return [
            self._to_descriptor(prefix, stored)
            for stored in self.storage_client.list_objects(prefix)
            if stored.key.startswith(prefix)
        ]

    def _to_descriptor(self, prefix: str, stored: StoredObject) -> DocumentDescriptor:
        return DocumentDescriptor(
            name=stored.key[len(prefix):],
            url=self.storage_client.build_access_url(stored.key),
            size=stored.size or 0,
            content_type=stored.content_type or DEFAULT_CONTENT_TYPE,
            created_at=stored.created_at.isoformat() if stored.created_at else None,
        )

    def _failure(
        self,
        identifier: str,
        error_type: ErrorType,
        status_code: int,
        detail: str,
    ) -> ListingError:
        """Build a classified failure, hiding internals outside non-production."""
        if error_type is ErrorType.CONFIG_ERROR and status_code == 500:
            # SDK-level missing credentials, not a rejection by the store
            message = CONFIG_MISSING_MESSAGE
        else:
            message = STORAGE_FAILURE_MESSAGES.get(
                error_type, STORAGE_FAILURE_MESSAGES[ErrorType.SERVER_ERROR]
            )
        return ListingError(
            type=error_type,
            message=message,
            details=detail if self.expose_details else None,
            identifier=identifier,
            status_code=status_code,
        )

"""
Exception hierarchy for the certificate portal.

Provides layered exception structure for domain-specific errors.
Every exception carries the error category and HTTP status it surfaces as,
plus context for observability and debugging.

Dependencies: certportal.core.errors
System role: Centralized exception handling across the application
"""

from typing import Any

from certportal.core.errors import ErrorType


class CertPortalException(Exception):
    """Base exception for all certificate portal errors."""

    error_type: ErrorType = ErrorType.SERVER_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidIdentifierError(CertPortalException):
    """Raised when a NIT does not have 8 to 11 digits."""

    error_type = ErrorType.INVALID_IDENTIFIER
    status_code = 400

    def __init__(self, identifier: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["identifier"] = identifier
        super().__init__("NIT inválido. Debe contener entre 8 y 11 dígitos.", details)


class StorageError(CertPortalException):
    """Raised when an object store operation fails for an unclassified reason."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Storage operation that failed (list, sign)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StorageUnavailableError(StorageError):
    """Raised when the object store cannot be reached (DNS, refused, timeout)."""

    error_type = ErrorType.NETWORK_ERROR
    status_code = 503


class StorageAccessDeniedError(StorageError):
    """Raised when the object store was reached but rejected the credentials."""

    error_type = ErrorType.CONFIG_ERROR
    status_code = 403


class StorageConfigurationError(StorageError):
    """Raised when storage credentials are missing from the deployment."""

    error_type = ErrorType.CONFIG_ERROR
    status_code = 500

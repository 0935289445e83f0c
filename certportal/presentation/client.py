"""
HTTP client for the listing API.

Fetches a company's documents over HTTP and converts every outcome,
transport failures included, into a listing envelope.

Dependencies: httpx, pydantic, certportal.presentation.error_mapping
System role: Presentation-side consumer of the listing JSON contract
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from certportal.configs.portal import PortalSettings
from certportal.core.errors import ErrorType
from certportal.models.document import ListingError, ListingResult, ListingSuccess
from certportal.presentation.error_mapping import classify_http_error

logger = logging.getLogger(__name__)


class CertificatesApiClient:
    """Consumer of `GET /api/companies/{identifier}`."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize API client.

        Args:
            base_url: Base URL of the listing API
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: PortalSettings) -> "CertificatesApiClient":
        return cls(base_url=settings.api_base_url, timeout=settings.request_timeout)

    async def fetch_documents(self, identifier: str) -> ListingResult:
        """
        Fetch the documents of a company.

        Args:
            identifier: Company NIT

        Returns:
            ListingResult: Success envelope or classified error; never raises
            for transport or decoding problems
        """
        path = f"/api/companies/{quote(identifier, safe='')}"

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, headers={"Accept": "application/json"})
        except httpx.TransportError as e:
            logger.warning(
                "Listing API unreachable",
                extra={"identifier": identifier, "error_type": type(e).__name__, "error": str(e)},
            )
            return ListingError(
                type=ErrorType.NETWORK_ERROR,
                message="Error de conexión",
                details="No se pudo conectar con el servidor.",
                identifier=identifier,
                status_code=503,
            )

        return self._to_result(identifier, response)

    def _to_result(self, identifier: str, response: httpx.Response) -> ListingResult:
        """Convert an HTTP response into a listing envelope."""
        status = response.status_code
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            logger.error(
                "Listing API did not answer JSON",
                extra={"identifier": identifier, "status_code": status, "content_type": content_type},
            )
            return self._server_error(
                identifier,
                "Error del servidor",
                "El servidor no respondió con JSON válido.",
                status,
            )

        try:
            data = response.json()
        except ValueError:
            logger.error(
                "Listing API returned an undecodable body",
                extra={"identifier": identifier, "status_code": status},
            )
            return self._server_error(
                identifier,
                "Error de configuración",
                "El servidor retornó una respuesta que no es JSON.",
                status,
            )

        if not isinstance(data, dict):
            return self._server_error(
                identifier, "Error del servidor", "Respuesta con formato inesperado.", status
            )

        if not response.is_success:
            return ListingError(
                type=classify_http_error(status),
                message=data.get("error") or data.get("message") or f"Error HTTP {status}",
                details=data.get("details") or f"La API respondió con código {status}",
                identifier=identifier,
                status_code=status,
            )

        if data.get("success") is not True:
            return self._server_error(
                identifier,
                data.get("error") or "Error del servidor",
                data.get("details") or "La API retornó success: false",
                status,
            )

        try:
            return ListingSuccess.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Listing API success body did not match the contract",
                extra={"identifier": identifier, "error": str(e)},
            )
            return self._server_error(
                identifier, "Error del servidor", "Respuesta con formato inesperado.", status
            )

    @staticmethod
    def _server_error(identifier: str, message: str, details: str, status: int) -> ListingError:
        return ListingError(
            type=ErrorType.SERVER_ERROR,
            message=message,
            details=details,
            identifier=identifier,
            status_code=status if status >= 400 else 500,
        )

"""
Company document API endpoints.

Routes:
- GET /companies/{identifier} - List the certificates stored for a NIT

Dependencies: certportal.application.services, certportal.models
System role: Document listing HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from certportal.api.deps import get_listing_service
from certportal.application.services import ListingService
from certportal.core.errors import ErrorType
from certportal.models.common import ErrorResponse, NotFoundResponse
from certportal.models.document import ListingError, ListingResult, ListingSuccess

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["companies"])


def to_http_response(result: ListingResult) -> JSONResponse:
    """
    Translate a listing envelope into its HTTP response.

    Args:
        result: Envelope returned by the listing service

    Returns:
        JSONResponse: 200 with documents, 404 with an empty list, or an
        error body with the status the failure was classified as
    """
    if isinstance(result, ListingSuccess):
        return JSONResponse(
            status_code=200,
            content=result.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    if result.type is ErrorType.NOT_FOUND:
        body = NotFoundResponse(message=result.message, identifier=result.identifier or "")
        return JSONResponse(status_code=404, content=body.model_dump(mode="json"))

    body = ErrorResponse(error=result.message, details=result.details)
    return JSONResponse(
        status_code=result.status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


@router.get(
    "/{identifier}",
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": NotFoundResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def get_company_documents(
    identifier: str,
    listing_service: ListingService = Depends(get_listing_service),
) -> JSONResponse:
    """
    List the certificate documents stored for a company.

    Args:
        identifier: Company NIT (8 to 11 digits)
        listing_service: Injected ListingService

    Returns:
        JSONResponse: Listing envelope translated to HTTP
    """
    result = await listing_service.list_documents(identifier)

    if isinstance(result, ListingError):
        logger.info(
            "Listing ended in error",
            extra={"identifier": identifier, "error_type": result.type.value},
        )

    return to_http_response(result)

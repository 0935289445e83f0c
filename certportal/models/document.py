"""
Document domain models and schemas.

Document descriptors and the listing result envelope shared by the
listing service, the HTTP router and the presentation adapter.

Dependencies: pydantic
System role: Document listing contracts
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from certportal.core.errors import ErrorType


class DocumentDescriptor(BaseModel):
    """A downloadable certificate as exposed to the presentation layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(description="Object key without the NIT folder prefix")
    url: str = Field(description="Access URL carrying the read credential")
    size: int = Field(default=0, description="Size in bytes")
    content_type: str = Field(
        default="application/octet-stream",
        description="MIME type reported by the store",
    )
    created_at: str | None = Field(
        default=None,
        description="ISO-8601 creation timestamp, when the store reports one",
    )


class ListingSuccess(BaseModel):
    """Successful listing for an identifier."""

    success: Literal[True] = True
    identifier: str
    documents: list[DocumentDescriptor]
    count: int
    message: str = ""


class ListingError(BaseModel):
    """Classified listing failure."""

    type: ErrorType
    message: str
    details: str | None = None
    identifier: str | None = None
    status_code: int = Field(
        default=500,
        exclude=True,
        description="HTTP status the error surfaces as",
    )


ListingResult = Union[ListingSuccess, ListingError]

"""
Common response models.

HTTP error bodies returned by the listing endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field

from certportal.models.document import DocumentDescriptor


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: str | None = Field(default=None, description="Underlying failure, non-production only")


class NotFoundResponse(BaseModel):
    """Well-formed identifier without any stored document."""

    message: str
    identifier: str
    documents: list[DocumentDescriptor] = Field(default_factory=list)

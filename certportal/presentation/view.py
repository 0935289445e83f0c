"""
View models for the certificates page.

Turns a listing envelope into a render-ready view: a document list, an
empty state or an error state. Icon, colour and actions of an error state
depend only on the error category.

Dependencies: pydantic, certportal.models
System role: Presentation mapping for the listing result
"""

from datetime import datetime
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field

from certportal.core.errors import ErrorType
from certportal.models.document import DocumentDescriptor, ListingResult, ListingSuccess

SPANISH_MONTHS = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)

KB = 1024
MB = KB * 1024
GB = MB * 1024


class ViewState(str, Enum):
    """Which branch of the page is shown."""

    DOCUMENTS = "documents"
    EMPTY = "empty"
    ERROR = "error"


class ViewAction(str, Enum):
    """User-triggered actions offered by a view."""

    RETRY = "retry"
    TRY_ANOTHER = "try_another"
    HOME = "home"


class ErrorStyle(NamedTuple):
    icon: str
    color: str


ERROR_STYLES: dict[str, ErrorStyle] = {
    ErrorType.NOT_FOUND.value: ErrorStyle("file-x", "orange"),
    ErrorType.NETWORK_ERROR.value: ErrorStyle("wifi", "blue"),
    ErrorType.SERVER_ERROR.value: ErrorStyle("server", "red"),
    ErrorType.INVALID_IDENTIFIER.value: ErrorStyle("alert-triangle", "yellow"),
    ErrorType.CONFIG_ERROR.value: ErrorStyle("help-circle", "purple"),
}

GENERIC_ERROR_STYLE = ErrorStyle("help-circle", "gray")

# Input problems send the user back to the search form
TRY_ANOTHER_ERRORS = {ErrorType.INVALID_IDENTIFIER.value, ErrorType.NOT_FOUND.value}

# Operator-fixable, retrying from the browser cannot help
NON_RETRIABLE_ERRORS = {ErrorType.CONFIG_ERROR.value}


class DocumentCard(BaseModel):
    """One document row of the list."""

    position: int
    name: str
    url: str
    icon: str
    size_label: str
    date_label: str


class View(BaseModel):
    """Render-ready page state."""

    state: ViewState
    identifier: str | None = None
    title: str
    message: str | None = None
    details: str | None = None
    icon: str
    color: str
    error_type: str | None = None
    actions: list[ViewAction] = Field(default_factory=list)
    documents: list[DocumentCard] = Field(default_factory=list)


def format_file_size(size: int | None) -> str:
    """Human-readable size with two decimals above one kilobyte."""
    if not size:
        return "Tamaño desconocido"
    if size < 0:
        return "Tamaño no válido"
    if size >= GB:
        return f"{size / GB:.2f} GB"
    if size >= MB:
        return f"{size / MB:.2f} MB"
    if size >= KB:
        return f"{size / KB:.2f} KB"
    return f"{size} Bytes"


def format_date(value: str | None) -> str:
    """Spanish long date ("5 de marzo de 2024") from an ISO-8601 string."""
    if not value:
        return "Fecha no disponible"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return "Fecha no disponible"
    return f"{parsed.day} de {SPANISH_MONTHS[parsed.month - 1]} de {parsed.year}"


def file_icon(name: str) -> str:
    """Icon key for a document, chosen by extension."""
    extension = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    if extension == "pdf":
        return "pdf"
    if extension in ("doc", "docx"):
        return "docx"
    if extension in ("xls", "xlsx"):
        return "xlsx"
    return "file"


def _document_card(position: int, document: DocumentDescriptor) -> DocumentCard:
    return DocumentCard(
        position=position,
        name=document.name,
        url=document.url,
        icon=file_icon(document.name),
        size_label=format_file_size(document.size),
        date_label=format_date(document.created_at),
    )


def _error_actions(error_type: str) -> list[ViewAction]:
    if error_type in TRY_ANOTHER_ERRORS:
        return [ViewAction.TRY_ANOTHER, ViewAction.HOME]
    if error_type in NON_RETRIABLE_ERRORS:
        return [ViewAction.HOME]
    return [ViewAction.RETRY, ViewAction.HOME]


def render(result: ListingResult, identifier: str | None = None) -> View:
    """
    Map a listing envelope to a view.

    Args:
        result: Success or error envelope
        identifier: NIT being shown, used when the envelope lacks one

    Returns:
        View: documents, empty or error state
    """
    if isinstance(result, ListingSuccess):
        nit = result.identifier or identifier
        if not result.documents:
            return View(
                state=ViewState.EMPTY,
                identifier=nit,
                title="No hay documentos disponibles",
                message=f"No se encontraron certificados para el NIT {nit}.",
                icon="file-x",
                color="gray",
                actions=[ViewAction.TRY_ANOTHER, ViewAction.RETRY],
            )
        count = len(result.documents)
        return View(
            state=ViewState.DOCUMENTS,
            identifier=nit,
            title="Certificados disponibles",
            message=f"{count} documento{'s' if count != 1 else ''}",
            icon="file-text",
            color="emerald",
            documents=[
                _document_card(position, document)
                for position, document in enumerate(result.documents, start=1)
            ],
        )

    # Enum members and raw strings alike, so unknown categories still render
    error_type = getattr(result.type, "value", result.type)
    style = ERROR_STYLES.get(error_type, GENERIC_ERROR_STYLE)
    return View(
        state=ViewState.ERROR,
        identifier=result.identifier or identifier,
        title=result.message,
        details=result.details,
        icon=style.icon,
        color=style.color,
        error_type=error_type,
        actions=_error_actions(error_type),
    )

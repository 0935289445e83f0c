"""
Test suite for the certificates view mapping.

Tests the documents, empty and error states, per-category styling and
actions, and the document card formatting helpers.

System role: Verification of the presentation mapping
"""

import pytest

from certportal.core.errors import ErrorType
from certportal.models.document import DocumentDescriptor, ListingError, ListingSuccess
from certportal.presentation.view import (
    ViewAction,
    ViewState,
    file_icon,
    format_date,
    format_file_size,
    render,
)
from tests.conftest import IDENTIFIER


def _success(*documents: DocumentDescriptor) -> ListingSuccess:
    return ListingSuccess(
        identifier=IDENTIFIER,
        documents=list(documents),
        count=len(documents),
        message="",
    )


class TestRenderSuccess:
    """Success envelopes."""

    def test_documents_state_lists_cards_in_order(self) -> None:
        result = _success(
            DocumentDescriptor(name="a.pdf", url="u1", size=2048, created_at="2024-03-05T14:30:00+00:00"),
            DocumentDescriptor(name="b.xlsx", url="u2"),
        )

        view = render(result)

        assert view.state is ViewState.DOCUMENTS
        assert view.identifier == IDENTIFIER
        assert view.message == "2 documentos"
        assert [card.position for card in view.documents] == [1, 2]
        first, second = view.documents
        assert (first.name, first.url, first.icon) == ("a.pdf", "u1", "pdf")
        assert first.size_label == "2.00 KB"
        assert first.date_label == "5 de marzo de 2024"
        assert second.icon == "xlsx"
        assert second.size_label == "Tamaño desconocido"
        assert second.date_label == "Fecha no disponible"

    def test_single_document_message_is_singular(self) -> None:
        view = render(_success(DocumentDescriptor(name="a.pdf", url="u")))

        assert view.message == "1 documento"

    def test_empty_success_renders_empty_state(self) -> None:
        view = render(_success())

        assert view.state is ViewState.EMPTY
        assert view.documents == []
        assert view.actions == [ViewAction.TRY_ANOTHER, ViewAction.RETRY]
        assert IDENTIFIER in view.message

    def test_empty_state_differs_from_not_found(self) -> None:
        empty = render(_success())
        not_found = render(
            ListingError(type=ErrorType.NOT_FOUND, message="none", identifier=IDENTIFIER)
        )

        assert empty.state is ViewState.EMPTY
        assert not_found.state is ViewState.ERROR


class TestRenderError:
    """Error envelopes."""

    @pytest.mark.parametrize(
        "error_type, icon, color, actions",
        [
            (ErrorType.NOT_FOUND, "file-x", "orange", [ViewAction.TRY_ANOTHER, ViewAction.HOME]),
            (ErrorType.INVALID_IDENTIFIER, "alert-triangle", "yellow", [ViewAction.TRY_ANOTHER, ViewAction.HOME]),
            (ErrorType.NETWORK_ERROR, "wifi", "blue", [ViewAction.RETRY, ViewAction.HOME]),
            (ErrorType.SERVER_ERROR, "server", "red", [ViewAction.RETRY, ViewAction.HOME]),
            (ErrorType.CONFIG_ERROR, "help-circle", "purple", [ViewAction.HOME]),
        ],
    )
    def test_error_style_and_actions_depend_on_type(self, error_type, icon, color, actions) -> None:
        view = render(
            ListingError(type=error_type, message="Algo falló", details="detalle"),
            identifier=IDENTIFIER,
        )

        assert view.state is ViewState.ERROR
        assert view.error_type == error_type.value
        assert (view.icon, view.color) == (icon, color)
        assert view.actions == actions
        assert view.title == "Algo falló"
        assert view.details == "detalle"
        assert view.identifier == IDENTIFIER

    def test_config_error_offers_no_retry(self) -> None:
        view = render(ListingError(type=ErrorType.CONFIG_ERROR, message="x"))

        assert ViewAction.RETRY not in view.actions

    def test_unknown_error_type_falls_back_to_neutral_style(self) -> None:
        error = ListingError.model_construct(
            type="teapot", message="?", details=None, identifier=None, status_code=418
        )

        view = render(error)

        assert view.state is ViewState.ERROR
        assert (view.icon, view.color) == ("help-circle", "gray")
        assert view.error_type == "teapot"


class TestFormatting:
    """Document card helpers."""

    @pytest.mark.parametrize(
        "size, label",
        [
            (None, "Tamaño desconocido"),
            (0, "Tamaño desconocido"),
            (-5, "Tamaño no válido"),
            (512, "512 Bytes"),
            (1024, "1.00 KB"),
            (1536, "1.50 KB"),
            (5 * 1024 * 1024, "5.00 MB"),
            (3 * 1024 * 1024 * 1024, "3.00 GB"),
        ],
    )
    def test_format_file_size(self, size, label) -> None:
        assert format_file_size(size) == label

    @pytest.mark.parametrize(
        "value, label",
        [
            ("2024-12-31T23:59:59+00:00", "31 de diciembre de 2024"),
            ("2023-01-01T00:00:00Z", "1 de enero de 2023"),
            (None, "Fecha no disponible"),
            ("not a date", "Fecha no disponible"),
        ],
    )
    def test_format_date(self, value, label) -> None:
        assert format_date(value) == label

    @pytest.mark.parametrize(
        "name, icon",
        [
            ("a.PDF", "pdf"),
            ("a.doc", "docx"),
            ("a.docx", "docx"),
            ("a.xls", "xlsx"),
            ("a.xlsx", "xlsx"),
            ("a.zip", "file"),
            ("README", "file"),
        ],
    )
    def test_file_icon(self, name, icon) -> None:
        assert file_icon(name) == icon

"""
Presentation adapter.

Consumes the listing HTTP contract and produces render-ready views.
"""

from certportal.presentation.client import CertificatesApiClient
from certportal.presentation.error_mapping import classify_http_error
from certportal.presentation.identifier_form import check_identifier_input
from certportal.presentation.page import load_certificates_view
from certportal.presentation.view import View, ViewAction, ViewState, render

__all__ = [
    "CertificatesApiClient",
    "View",
    "ViewAction",
    "ViewState",
    "check_identifier_input",
    "classify_http_error",
    "load_certificates_view",
    "render",
]

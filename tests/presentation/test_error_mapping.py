"""
Test suite for classify_http_error.

System role: Verification of the status code to error category table
"""

import pytest

from certportal.core.errors import ErrorType
from certportal.presentation import classify_http_error


@pytest.mark.parametrize(
    "status, expected",
    [
        (400, ErrorType.INVALID_IDENTIFIER),
        (404, ErrorType.NOT_FOUND),
        (500, ErrorType.SERVER_ERROR),
        (503, ErrorType.SERVER_ERROR),
        (403, ErrorType.CONFIG_ERROR),
        (418, ErrorType.SERVER_ERROR),
        (401, ErrorType.SERVER_ERROR),
        (502, ErrorType.SERVER_ERROR),
        (200, ErrorType.SERVER_ERROR),
        (0, ErrorType.SERVER_ERROR),
        (-1, ErrorType.SERVER_ERROR),
    ],
)
def test_classify_http_error(status: int, expected: ErrorType) -> None:
    assert classify_http_error(status) is expected


def test_classify_http_error_values_are_wire_strings() -> None:
    assert classify_http_error(403) == "config_error"
    assert classify_http_error(404) == "not_found"
    assert classify_http_error(418) == "server_error"

"""
HTTP status to error category mapping.

Dependencies: certportal.core.errors
System role: Seam between transport status codes and the error taxonomy
"""

from certportal.core.errors import ErrorType

_STATUS_TO_ERROR_TYPE = {
    400: ErrorType.INVALID_IDENTIFIER,
    403: ErrorType.CONFIG_ERROR,
    404: ErrorType.NOT_FOUND,
    500: ErrorType.SERVER_ERROR,
    503: ErrorType.SERVER_ERROR,
}


def classify_http_error(status: int) -> ErrorType:
    """Map an HTTP status code to its error category; unknown codes are server errors."""
    return _STATUS_TO_ERROR_TYPE.get(status, ErrorType.SERVER_ERROR)

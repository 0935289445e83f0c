"""
Error taxonomy shared by the listing service and the presentation adapter.

Dependencies: None (pure domain layer)
System role: Fixed, mutually exclusive error categories
"""

from enum import Enum


class ErrorType(str, Enum):
    """The five error categories a listing can end in."""

    INVALID_IDENTIFIER = "invalid_identifier"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    CONFIG_ERROR = "config_error"

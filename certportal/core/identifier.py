"""
Company identifier (NIT) rules.

Dependencies: re (stdlib)
System role: Input validation before any storage access
"""

import re

# ASCII digits only, and fullmatch so a trailing newline is rejected
IDENTIFIER_PATTERN = re.compile(r"\d{8,11}", re.ASCII)

MIN_IDENTIFIER_LENGTH = 8


def is_valid_identifier(identifier: str | None) -> bool:
    """Return True when the identifier is 8 to 11 decimal digits."""
    if not identifier:
        return False
    return IDENTIFIER_PATTERN.fullmatch(identifier) is not None


def folder_prefix(identifier: str) -> str:
    """Key prefix of the logical folder holding an identifier's documents."""
    return f"{identifier}/"

"""
Exception logging helper.

Renders context values into short strings so a single odd value (a huge
error message, an exception details dict) cannot bloat or break a record.

Dependencies: logging (stdlib)
System role: Structured exception logging for the service layer
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """Short string form of a context value; dicts are summarised by key count."""
    if value is None:
        return "None"
    text = f"dict({len(value)} keys)" if isinstance(value, dict) else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception at ERROR with its traceback and rendered context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Extra fields attached to the record
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)

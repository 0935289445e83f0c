"""
Logging setup.

Single stdout handler whose records carry the request correlation ID.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from certportal.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(correlation_id)s] %(message)s"

# Chatty SDK/transport loggers kept at WARNING
QUIET_LOGGERS = ("urllib3", "botocore", "boto3", "s3transfer", "httpx", "httpcore")


class CorrelationIdFilter(logging.Filter):
    """Attach the current correlation ID to every record ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Replace root handlers with one correlation-aware stdout handler."""
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

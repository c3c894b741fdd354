"""
Centralized logging configuration for cartstore.

Usage:
    from cartstore.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Payment completed")
    logger.debug("Product not found", exc_info=True)
"""

import logging
import sys
from functools import cache

from cartstore.config import settings

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    """Get log level from settings or default to INFO."""
    return getattr(logging, settings.log_level, logging.INFO)


def _configure_root_logger() -> None:
    """Configure root logger with a stdout handler."""
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())

    # Simple format in production, detailed locally
    formatter = logging.Formatter(LOG_FORMAT_SIMPLE if settings.is_production else LOG_FORMAT)
    handler.setFormatter(formatter)

    root.addHandler(handler)


# Configure once on module import
_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """
    Escape characters that could be used for log injection (CWE-117).

    Args:
        value: String to escape

    Returns:
        Escaped string safe for logging
    """
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: object | None) -> str:
    """
    Sanitize an id for logging: escape control characters, keep 8 chars.

    Product ids are usually ints, but callers may pass anything.

    Args:
        id_value: ID value to sanitize (can be None)

    Returns:
        Sanitized ID string or "N/A" if None
    """
    if id_value is None or id_value == "":
        return "N/A"
    safe_value = _escape_log_injection(str(id_value))
    return safe_value[:8] if len(safe_value) > 8 else safe_value


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Sanitize string for safe logging (truncate to max_length).

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if None
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]

"""
Helpers for putting request data into log records.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging


def clip_for_log(text: str, limit: int = 200) -> str:
    """Cut user-supplied text to limit characters, noting the original length."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"


def log_unexpected_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log an exception nobody mapped to a domain error, with its traceback."""
    logger.exception(
        message,
        extra={"error_type": type(exc).__name__, "error_msg": clip_for_log(str(exc), limit=500)},
    )

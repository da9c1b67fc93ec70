"""
Observability module.

Logging configuration, correlation IDs and request middleware.
"""

from docqa.observability.correlation import get_correlation_id, set_correlation_id
from docqa.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]

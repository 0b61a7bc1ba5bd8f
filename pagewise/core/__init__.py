"""Core utilities package."""

from .exceptions import CountError, FetchError, QueryError
from .logging import get_logger, log_event, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "log_event",
    "QueryError",
    "CountError",
    "FetchError",
]

"""Errors raised by query adapters."""

from typing import Any, Dict, Optional


class QueryError(Exception):
    """A count or fetch against the backing store failed."""

    code = "QUERY_FAILED"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CountError(QueryError):
    """Counting the full collection failed."""

    code = "COUNT_FAILED"


class FetchError(QueryError):
    """Retrieving the items of a page failed."""

    code = "FETCH_FAILED"

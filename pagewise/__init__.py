"""Offset pagination with navigation links for API responses."""

from pagewise.core.exceptions import CountError, FetchError, QueryError
from pagewise.pagination import (
    PageLinkBuilder,
    PaginatedList,
    PaginatedQuery,
    PaginationParams,
    RedisListQuery,
    RedisSortedSetQuery,
    SequenceQuery,
    get_page,
    get_page_mapped,
    resolve_default_params,
    resolve_params,
)

__version__ = "0.1.0"

__all__ = [
    "CountError",
    "FetchError",
    "QueryError",
    "PageLinkBuilder",
    "PaginatedList",
    "PaginatedQuery",
    "PaginationParams",
    "RedisListQuery",
    "RedisSortedSetQuery",
    "SequenceQuery",
    "get_page",
    "get_page_mapped",
    "resolve_default_params",
    "resolve_params",
]

"""Pagination package."""

from .links import PageLinkBuilder
from .page import PaginatedList, get_page, get_page_mapped, last_page_for
from .params import (
    PAGE_PARAM,
    PER_PAGE_PARAM,
    PaginationParams,
    resolve_default_params,
    resolve_params,
)
from .query import PaginatedQuery, RedisListQuery, RedisSortedSetQuery, SequenceQuery

__all__ = [
    # Parameters
    "PAGE_PARAM",
    "PER_PAGE_PARAM",
    "PaginationParams",
    "resolve_params",
    "resolve_default_params",
    # Links
    "PageLinkBuilder",
    # Pages
    "PaginatedList",
    "get_page",
    "get_page_mapped",
    "last_page_for",
    # Queries
    "PaginatedQuery",
    "SequenceQuery",
    "RedisSortedSetQuery",
    "RedisListQuery",
]

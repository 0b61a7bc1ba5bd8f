"""FastAPI dependencies for pagination."""

from typing import Callable

from fastapi import Request

from pagewise.core.config import settings
from pagewise.pagination.links import PageLinkBuilder
from pagewise.pagination.params import (
    PAGE_PARAM,
    PER_PAGE_PARAM,
    PaginationParams,
    resolve_params,
)


def get_pagination_params(request: Request) -> PaginationParams:
    """
    Resolve ``page`` and ``per_page`` from the query string.

    Read from the raw query params rather than declared ``Query`` ints so
    that malformed values fall back to the configured defaults instead of
    producing a 422.
    """
    return resolve_params(
        request.query_params.get(PAGE_PARAM),
        request.query_params.get(PER_PAGE_PARAM),
        settings.default_page,
        settings.default_per_page,
    )


def pagination_params_with_default(
    default_page: int, default_per_page: int
) -> Callable[[Request], PaginationParams]:
    """Build a dependency that resolves with the given defaults."""
    if default_page < 1 or default_per_page < 1:
        raise ValueError("Pagination defaults must be positive")

    def dependency(request: Request) -> PaginationParams:
        return resolve_params(
            request.query_params.get(PAGE_PARAM),
            request.query_params.get(PER_PAGE_PARAM),
            default_page,
            default_per_page,
        )

    return dependency


def get_link_builder(request: Request) -> PageLinkBuilder:
    """Link builder for the URL of the current request."""
    return PageLinkBuilder.from_request(request)

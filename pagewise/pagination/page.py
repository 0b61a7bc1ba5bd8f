"""Page computation: pagination arithmetic, item fetch and link derivation."""

import inspect
from dataclasses import dataclass, field, replace
from math import ceil
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pagewise.core.config import settings
from pagewise.core.logging import get_logger, log_event
from pagewise.pagination.links import PageLinkBuilder
from pagewise.pagination.params import PaginationParams
from pagewise.pagination.query import PaginatedQuery

logger = get_logger(__name__)

T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True)
class PaginatedList(Generic[T]):
    """One page of a larger ordered collection."""

    total: int
    per_page: int
    current_page: int
    last_page: int
    first_page_url: str
    last_page_url: str
    next_page_url: str
    prev_page_url: str
    path: str
    from_: int
    to: int
    data: List[T] = field(default_factory=list)

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_url)

    @property
    def has_previous(self) -> bool:
        return bool(self.prev_page_url)

    def map(self, mapper: Callable[[T, int], V]) -> "PaginatedList[V]":
        """Return a copy whose items are ``mapper(item, index)``."""
        return replace(
            self, data=[mapper(item, i) for i, item in enumerate(self.data)]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "per_page": self.per_page,
            "current_page": self.current_page,
            "last_page": self.last_page,
            "first_page_url": self.first_page_url,
            "last_page_url": self.last_page_url,
            "next_page_url": self.next_page_url,
            "prev_page_url": self.prev_page_url,
            "path": self.path,
            "from": self.from_,
            "to": self.to,
            "data": list(self.data),
        }


def last_page_for(total: int, per_page: int) -> int:
    """Number of pages needed for ``total`` items, never less than 1."""
    return max(1, ceil(total / per_page))


async def _call(fn: Callable[..., Any], *args: Any) -> Any:
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def get_page(
    query: PaginatedQuery[T],
    params: PaginationParams,
    links: PageLinkBuilder,
    *,
    clamp: Optional[bool] = None,
) -> PaginatedList[T]:
    """
    Count the collection, fetch the requested page and derive its metadata.

    With ``clamp`` a page past the end is treated as a request for the last
    page. Without it the arithmetic is applied to the requested page as is,
    so ``data`` may be empty and ``to`` may be less than ``from``. When
    ``clamp`` is None the configured default applies.

    Query failures are logged and re-raised unchanged.
    """
    if clamp is None:
        clamp = settings.clamp_out_of_range_pages
    per_page = params.per_page
    path = links.base_url

    try:
        total = await _call(query.count)
    except Exception as e:
        log_event(
            logger, "error", "page_query_failed",
            stage="count", error=str(e), error_type=type(e).__name__,
        )
        raise

    if total == 0:
        log_event(logger, "debug", "page_computed", total=0, page=1, per_page=per_page)
        return PaginatedList(
            total=0,
            per_page=per_page,
            current_page=1,
            last_page=1,
            first_page_url=links.page_url(1, per_page),
            last_page_url="",
            next_page_url="",
            prev_page_url="",
            path=path,
            from_=0,
            to=0,
            data=[],
        )

    last_page = last_page_for(total, per_page)
    page = min(params.page, last_page) if clamp else params.page

    pi = page - 1
    ni = page + 1
    from_ = pi * per_page + 1
    to = min(page * per_page, total)

    try:
        rows = await _call(query.fetch, pi * per_page, per_page)
    except Exception as e:
        log_event(
            logger, "error", "page_query_failed",
            stage="fetch", page=page, per_page=per_page,
            error=str(e), error_type=type(e).__name__,
        )
        raise

    first_url = links.page_url(1, per_page)
    last_url = links.page_url(last_page, per_page) if last_page > 1 else ""
    next_url = "" if ni > last_page else links.page_url(ni, per_page)
    prev_url = "" if pi < 1 else links.page_url(pi, per_page)

    data = list(rows)
    log_event(
        logger, "debug", "page_computed",
        total=total, page=page, per_page=per_page,
        last_page=last_page, returned=len(data),
    )

    return PaginatedList(
        total=total,
        per_page=per_page,
        current_page=page,
        last_page=last_page,
        first_page_url=first_url,
        last_page_url=last_url,
        next_page_url=next_url,
        prev_page_url=prev_url,
        path=path,
        from_=from_,
        to=to,
        data=data,
    )


async def get_page_mapped(
    query: PaginatedQuery[T],
    params: PaginationParams,
    links: PageLinkBuilder,
    mapper: Callable[[T, int], V],
    *,
    clamp: Optional[bool] = None,
) -> PaginatedList[V]:
    """Like get_page, with every item passed through ``mapper(item, index)``."""
    page = await get_page(query, params, links, clamp=clamp)
    return page.map(mapper)

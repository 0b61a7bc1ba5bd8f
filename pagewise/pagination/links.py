"""Navigation link construction from the current request URL."""

from typing import Union

from starlette.datastructures import URL
from starlette.requests import Request

from pagewise.pagination.params import PAGE_PARAM, PER_PAGE_PARAM


class PageLinkBuilder:
    """Builds absolute page links relative to one request URL."""

    def __init__(self, url: Union[str, URL]):
        self.url = url if isinstance(url, URL) else URL(url)

    @classmethod
    def from_request(cls, request: Request) -> "PageLinkBuilder":
        """Create a builder for the URL the request was made to."""
        return cls(request.url)

    def page_url(self, page: int, per_page: int) -> str:
        """Request URL with page and per_page overwritten, other params kept."""
        return str(
            self.url.include_query_params(**{PAGE_PARAM: page, PER_PAGE_PARAM: per_page})
        )

    @property
    def base_url(self) -> str:
        """Request URL without any query string."""
        return str(self.url.replace(query="", fragment=""))

    def without_pagination(self) -> str:
        """Request URL with only the pagination params removed."""
        return str(self.url.remove_query_params([PAGE_PARAM, PER_PAGE_PARAM]))

"""Resolution of raw page/per_page input into valid pagination parameters."""

import re
from dataclasses import dataclass
from typing import Any, Optional

PAGE_PARAM = "page"
PER_PAGE_PARAM = "per_page"

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

# Optional sign and ASCII digits only; no underscores, decimals or exponents.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class PaginationParams:
    """Resolved pagination parameters. Both fields are always >= 1."""

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self):
        if self.page < 1 or self.per_page < 1:
            raise ValueError(
                f"Pagination parameters must be positive, got "
                f"page={self.page} per_page={self.per_page}"
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


def _parse_positive(raw: Any) -> Optional[int]:
    """Return ``raw`` as a positive int, or None if it is not one."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not _INTEGER_RE.fullmatch(text):
            return None
        value = int(text)
    return value if value >= 1 else None


def resolve_params(
    raw_page: Any,
    raw_per_page: Any,
    default_page: int = DEFAULT_PAGE,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> PaginationParams:
    """
    Resolve raw page and page size values into PaginationParams.

    Missing, unparsable or non-positive values are replaced by the
    corresponding default. Malformed input never raises; only invalid
    defaults do.
    """
    if default_page < 1 or default_per_page < 1:
        raise ValueError(
            f"Pagination defaults must be positive, got "
            f"page={default_page} per_page={default_per_page}"
        )

    page = _parse_positive(raw_page)
    per_page = _parse_positive(raw_per_page)

    return PaginationParams(
        page=page if page is not None else default_page,
        per_page=per_page if per_page is not None else default_per_page,
    )


def resolve_default_params(raw_page: Any, raw_per_page: Any) -> PaginationParams:
    """Resolve with the fixed defaults of page 1 and 10 items per page."""
    return resolve_params(raw_page, raw_per_page, DEFAULT_PAGE, DEFAULT_PER_PAGE)

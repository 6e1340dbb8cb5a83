"""Page-number pagination shared by the sample search endpoint."""

import math
from dataclasses import dataclass
from typing import Any

from sample_search.core.constants import PAGE_SIZE
from .errors import InvalidPageError


def parse_page(raw: Any) -> int | None:
    """Return the 1-based page number, or None when no page was requested.

    Missing and empty values mean "no pagination". Anything else must be a
    positive integer; otherwise InvalidPageError is raised.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise InvalidPageError(raw)
    if isinstance(raw, int):
        page = raw
    else:
        s = str(raw).strip()
        if not s:
            return None
        if not s.isdecimal():
            raise InvalidPageError(raw)
        page = int(s)
    if page < 1:
        raise InvalidPageError(raw)
    return page


def total_pages_for(total: int, page_size: int = PAGE_SIZE) -> int:
    """ceil(total / page_size), with at least one (possibly empty) page."""
    return max(math.ceil(total / page_size), 1)


@dataclass(frozen=True)
class PageWindow:
    """Pagination facts for one requested page."""
    total: int
    current_page: int
    total_pages: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def current_page_items(self) -> int:
        # Last page holds the remainder (a full last page reports page_size, not 0)
        if self.current_page > self.total_pages:
            return 0
        if self.current_page == self.total_pages:
            return self.total - self.offset
        return self.page_size


def compute_page_window(total: int, page: int, page_size: int = PAGE_SIZE) -> PageWindow:
    return PageWindow(
        total=total,
        current_page=page,
        total_pages=total_pages_for(total, page_size),
        page_size=page_size,
    )

import math
from typing import Sequence, TypeVar

from sample_search.core.constants import PAGE_SIZE

T = TypeVar("T")


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Items on 1-based `page`; slicing truncates the last page."""
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def clamp_page(page: int, count: int, page_size: int = PAGE_SIZE) -> int:
    """Keep `page` within [1, total_pages] (page 1 when there are no items)."""
    return min(max(page, 1), max(total_pages(count, page_size), 1))

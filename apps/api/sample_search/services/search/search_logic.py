"""Sample search pipeline.

Pipeline: build scoped query (organisation + filters) -> count / fetch rows through the
QueryExecutor -> project rows to sample views -> attach pagination meta.
"""

import logging

from sample_search.core.constants import PAGE_SIZE
from sample_search.db.models import Organisation
from sample_search.schemas import SearchMeta, SearchParams, SearchResponse
from .executor import QueryExecutor
from .filters import build_sample_query
from .pagination import compute_page_window, parse_page
from .projection import extended_fields_enabled, included_profiles, project_samples

logger = logging.getLogger(__name__)


async def run_search(
    executor: QueryExecutor,
    organisation: Organisation,
    params: SearchParams,
    *,
    page_size: int = PAGE_SIZE,
    extended_fields: bool | None = None,
    include_profiles: bool = False,
) -> SearchResponse:
    """Search an organisation's samples.

    Without `page` every match is returned and currentPage/totalPages are null.
    With `page` at most `page_size` rows starting at (page - 1) * page_size are
    returned, along with totalPages and currentPageItems. Executor errors are
    not caught here.
    """
    page = parse_page(params.page)
    query = build_sample_query(str(organisation.id), params)
    if extended_fields is None:
        extended_fields = extended_fields_enabled(organisation)

    logger.info(
        "Sample search org=%s filters=%d page=%s",
        organisation.id, query.filter_count, page,
    )

    if page is None:
        rows = list(await executor.fetch_all(query))
        meta = SearchMeta(total=len(rows), current_page=None, total_pages=None)
    else:
        total = await executor.count(query)
        window = compute_page_window(total, page, page_size)
        rows = list(await executor.fetch_page(query, window.offset, window.limit))
        meta = SearchMeta(
            total=total,
            current_page=window.current_page,
            total_pages=window.total_pages,
            current_page_items=window.current_page_items,
        )
        logger.debug(
            "Sample search page %d/%d offset=%d rows=%d",
            window.current_page, window.total_pages, window.offset, len(rows),
        )

    data = project_samples(rows, extended_fields=extended_fields)
    if include_profiles:
        return SearchResponse(meta=meta, data=data, included=included_profiles(rows))
    return SearchResponse(meta=meta, data=data)

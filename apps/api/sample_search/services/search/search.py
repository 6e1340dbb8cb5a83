"""Search service facade.

Business logic is split across:
- query building: .filters
- execution: .executor
- pagination meta: .pagination
- row projection: .projection
- pipeline: .search_logic
"""

from sample_search.core.config import get_settings
from sample_search.db.models import Organisation
from sample_search.schemas import SearchParams, SearchResponse
from .executor import QueryExecutor
from .projection import extended_fields_enabled
from .search_logic import run_search


class SampleSearchService:
    """Facade for sample search operations."""

    @staticmethod
    async def search(
        executor: QueryExecutor,
        organisation: Organisation,
        params: SearchParams,
    ) -> SearchResponse:
        """Search for the HTTP surface: configured page size, profiles sideloaded in `included`."""
        s = get_settings()
        return await run_search(
            executor,
            organisation,
            params,
            page_size=s.page_size,
            extended_fields=extended_fields_enabled(organisation, s.extended_fields_org_name),
            include_profiles=True,
        )


search_service = SampleSearchService()

"""Client-side browsing state: organisation selection, free-text search, paging.

Sample fetches are tagged with a request token; a response is applied only if
its token is still the latest and its organisation is still selected.
"""

import logging
from typing import Optional

from sample_search.core.config import get_settings
from sample_search.core.constants import (
    ORGANISATIONS_FETCH_ERROR,
    PAGE_SIZE,
    SAMPLES_FETCH_ERROR,
)
from .api import OrganisationOption, SampleApiClient, SampleApiError
from .columns import Column, select_columns
from .debounce import Debouncer
from .enrichment import EnrichedPatient, enrich_samples
from .filtering import filter_patients
from .pagination import clamp_page, paginate, total_pages

logger = logging.getLogger(__name__)


class PatientManagementSession:
    def __init__(
        self,
        api: SampleApiClient,
        *,
        page_size: int = PAGE_SIZE,
        debounce_seconds: float | None = None,
    ):
        if debounce_seconds is None:
            debounce_seconds = get_settings().search_debounce_seconds
        self.api = api
        self.page_size = page_size
        self.organisations: list[OrganisationOption] = []
        self.selected: Optional[OrganisationOption] = None
        self.data: list[EnrichedPatient] = []
        self.loading = True
        self.error: Optional[str] = None
        self.search = ""
        self.debounced_search = ""
        self.current_page = 1
        self._request_token = 0
        self._debouncer = Debouncer(debounce_seconds, self._commit_search)

    # -- loading --------------------------------------------------------------

    async def load_organisations(self) -> None:
        """Fetch organisations and select the first one."""
        try:
            self.organisations = await self.api.list_organisations()
        except SampleApiError as e:
            logger.warning("Organisation fetch failed: %s", e)
            self.error = ORGANISATIONS_FETCH_ERROR
            self.loading = False
            return
        if self.organisations:
            await self.select_organisation(self.organisations[0].id)
        else:
            self.loading = False

    async def select_organisation(self, organisation_id: str) -> None:
        org = next((o for o in self.organisations if o.id == organisation_id), None)
        self.selected = org
        self.current_page = 1
        if org is None:
            self.data = []
            self.loading = False
            return
        await self._fetch_samples(org)

    async def _fetch_samples(self, org: OrganisationOption) -> None:
        self._request_token += 1
        token = self._request_token
        self.loading = True
        try:
            document = await self.api.fetch_samples(org.id)
        except SampleApiError as e:
            if not self._is_current(token, org):
                return
            logger.warning("Sample fetch failed for org %s: %s", org.id, e)
            self.error = SAMPLES_FETCH_ERROR
            self.loading = False
            return
        if not self._is_current(token, org):
            logger.warning("Discarding stale sample response for org %s", org.id)
            return
        self.data = enrich_samples(document, extended_fields=org.extended_fields)
        self.error = None
        self.loading = False

    def _is_current(self, token: int, org: OrganisationOption) -> bool:
        return (
            token == self._request_token
            and self.selected is not None
            and self.selected.id == org.id
        )

    # -- search ---------------------------------------------------------------

    def set_search(self, text: str) -> None:
        """Record typed text; filtering follows once typing pauses."""
        self.search = text
        self._debouncer.push(text)

    def flush_search(self) -> None:
        self._debouncer.flush()

    def _commit_search(self, text: str) -> None:
        self.debounced_search = text
        self.current_page = 1

    # -- view -----------------------------------------------------------------

    @property
    def extended_fields(self) -> bool:
        return bool(self.selected and self.selected.extended_fields)

    @property
    def filtered(self) -> list[EnrichedPatient]:
        return filter_patients(self.data, self.debounced_search)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered), self.page_size)

    @property
    def visible_rows(self) -> list[EnrichedPatient]:
        return paginate(self.filtered, self.current_page, self.page_size)

    @property
    def columns(self) -> list[Column]:
        return select_columns(self.extended_fields)

    @property
    def search_placeholder(self) -> str:
        prefix = "Patient ID, " if self.extended_fields else ""
        return f"{prefix}name, barcode, date, etc."

    @property
    def summary(self) -> str:
        return f"Showing {len(self.visible_rows)} of {len(self.filtered)} results"

    @property
    def can_go_previous(self) -> bool:
        return self.current_page > 1

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages

    def next_page(self) -> None:
        self.current_page = clamp_page(self.current_page + 1, len(self.filtered), self.page_size)

    def previous_page(self) -> None:
        self.current_page = clamp_page(self.current_page - 1, len(self.filtered), self.page_size)

    def close(self) -> None:
        self._debouncer.cancel()

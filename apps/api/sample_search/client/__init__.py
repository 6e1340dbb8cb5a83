"""Client for browsing an organisation's samples: fetch, enrich, search, paginate."""

from .api import OrganisationOption, SampleApiClient, SampleApiError, SampleDocument
from .columns import Column, select_columns
from .debounce import Debouncer
from .enrichment import EnrichedPatient, enrich_samples
from .filtering import filter_patients, tokenize
from .pagination import paginate, total_pages
from .session import PatientManagementSession

__all__ = [
    "OrganisationOption",
    "SampleApiClient",
    "SampleApiError",
    "SampleDocument",
    "Column",
    "select_columns",
    "Debouncer",
    "EnrichedPatient",
    "enrich_samples",
    "filter_patients",
    "tokenize",
    "paginate",
    "total_pages",
    "PatientManagementSession",
]

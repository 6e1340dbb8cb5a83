"""Sample search pipeline: filters, execution, pagination, projection."""

from .errors import SearchParamError, InvalidPageError, InvalidDateError, InvalidPatientIdError
from .executor import QueryExecutor, SqlAlchemyQueryExecutor
from .filters import SampleQuery, build_filter_predicates, build_sample_query
from .pagination import PageWindow, compute_page_window, parse_page
from .projection import extended_fields_enabled, project_sample
from .search import search_service
from .search_logic import run_search

__all__ = [
    "SearchParamError",
    "InvalidPageError",
    "InvalidDateError",
    "InvalidPatientIdError",
    "QueryExecutor",
    "SqlAlchemyQueryExecutor",
    "SampleQuery",
    "build_filter_predicates",
    "build_sample_query",
    "PageWindow",
    "compute_page_window",
    "parse_page",
    "extended_fields_enabled",
    "project_sample",
    "search_service",
    "run_search",
]

"""Build the organisation-scoped sample query from search parameters.

Predicates are collected in a fixed order (organisation scope first, then
patientName, sampleBarcode, activationDate, resultDate, patientId) and
AND-combined when the statement is rendered.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import Select, and_, func, select
from sqlalchemy.sql.elements import ColumnElement

from sample_search.db.models import Organisation, Profile, Result
from sample_search.schemas import SearchParams
from .errors import InvalidDateError, InvalidPatientIdError

LIKE_ESCAPE = "\\"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    s = value.strip()
    return s if s else None


def _parse_date(param: str, value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(param, value) from e


def _parse_uuid(value: str) -> str:
    """Canonical hyphenated form; profile ids are UUID columns."""
    try:
        return str(uuid.UUID(value))
    except ValueError as e:
        raise InvalidPatientIdError(value) from e


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input only matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


@dataclass
class SampleQuery:
    """Scoped, filtered sample query. Execution is left to a QueryExecutor."""
    organisation_id: str
    predicates: list[ColumnElement] = field(default_factory=list)

    @property
    def filter_count(self) -> int:
        """Number of user filters (excludes the organisation scope)."""
        return max(len(self.predicates) - 1, 0)

    def where_clause(self) -> ColumnElement:
        return and_(*self.predicates)

    def base_statement(self) -> Select:
        """Result joined to Profile and Organisation, with all predicates applied."""
        return (
            select(Result)
            .join(Result.profile)
            .join(Profile.organisation)
            .where(self.where_clause())
        )

    def rows_statement(self) -> Select:
        """Ordered row statement; the ordering keeps page windows stable."""
        return self.base_statement().order_by(Result.activate_time.asc(), Result.id.asc())

    def count_statement(self) -> Select:
        return select(func.count()).select_from(self.base_statement().subquery())


def build_filter_predicates(params: SearchParams) -> list[ColumnElement]:
    """User filters in application order. Empty or missing parameters add nothing."""
    predicates: list[ColumnElement] = []

    patient_name = _clean(params.patient_name)
    if patient_name:
        predicates.append(Profile.name.ilike(contains_pattern(patient_name), escape=LIKE_ESCAPE))

    sample_barcode = _clean(params.sample_barcode)
    if sample_barcode:
        predicates.append(Result.sample_id.ilike(contains_pattern(sample_barcode), escape=LIKE_ESCAPE))

    activation_date = _clean(params.activation_date)
    if activation_date:
        predicates.append(
            func.date(Result.activate_time) == _parse_date("activationDate", activation_date)
        )

    result_date = _clean(params.result_date)
    if result_date:
        predicates.append(
            func.date(Result.result_time) == _parse_date("resultDate", result_date)
        )

    patient_id = _clean(params.patient_id)
    if patient_id:
        predicates.append(Profile.id == _parse_uuid(patient_id))

    return predicates


def build_sample_query(organisation_id: str, params: SearchParams) -> SampleQuery:
    """Organisation scope plus the user filters from `params`."""
    scope = Organisation.id == organisation_id
    return SampleQuery(
        organisation_id=organisation_id,
        predicates=[scope, *build_filter_predicates(params)],
    )

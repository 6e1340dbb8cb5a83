"""Map joined Result rows to the sample envelope entries."""

from typing import Iterable

from sample_search.core.config import get_settings
from sample_search.core.constants import PROFILE_RESOURCE_TYPE, SAMPLE_RESOURCE_TYPE
from sample_search.db.models import Organisation, Result
from sample_search.schemas import (
    ProfileAttributes,
    ProfileRelationship,
    ProfileResource,
    ResourceIdentifier,
    SampleAttributes,
    SampleRelationships,
    SampleView,
)


def extended_fields_enabled(organisation: Organisation, org_name: str | None = None) -> bool:
    """Whether responses for this organisation carry resultType and patientId (exact, case-sensitive name match)."""
    if org_name is None:
        org_name = get_settings().extended_fields_org_name
    return organisation.name == org_name


def project_sample(row: Result, *, extended_fields: bool) -> SampleView:
    """Build a new SampleView from a Result with its profile loaded. The row is only read."""
    profile_id = str(row.profile.id)
    attrs = {
        "result": row.result,
        "sample_id": row.sample_id,
        "activate_time": row.activate_time,
        "result_time": row.result_time,
    }
    if extended_fields:
        attrs["result_type"] = row.type
        attrs["patient_id"] = profile_id
    return SampleView(
        id=str(row.id),
        type=SAMPLE_RESOURCE_TYPE,
        attributes=SampleAttributes(**attrs),
        relationships=SampleRelationships(
            profile=ProfileRelationship(
                data=ResourceIdentifier(type=PROFILE_RESOURCE_TYPE, id=profile_id),
            ),
        ),
    )


def project_samples(rows: Iterable[Result], *, extended_fields: bool) -> list[SampleView]:
    return [project_sample(r, extended_fields=extended_fields) for r in rows]


def included_profiles(rows: Iterable[Result]) -> list[ProfileResource]:
    """Profiles referenced by `rows`, deduplicated in first-seen order."""
    seen: set[str] = set()
    out: list[ProfileResource] = []
    for r in rows:
        pid = str(r.profile.id)
        if pid in seen:
            continue
        seen.add(pid)
        out.append(
            ProfileResource(
                type=PROFILE_RESOURCE_TYPE,
                id=pid,
                attributes=ProfileAttributes(name=r.profile.name),
            )
        )
    return out

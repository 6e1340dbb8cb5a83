"""Flatten a sample document into one table row per sample."""

from dataclasses import dataclass
from typing import Optional

from sample_search.core.constants import UNKNOWN_PATIENT_NAME
from .api import SampleDocument


@dataclass(frozen=True)
class EnrichedPatient:
    name: str
    sample_id: str
    activate_time: str
    result_time: str
    result: str
    # Set only for organisations with extended fields
    result_type: Optional[str] = None
    id: Optional[str] = None

    def searchable_values(self) -> list[str]:
        """Values matched by the free-text search; absent extended fields are skipped."""
        values = [self.name, self.sample_id, self.activate_time, self.result_time, self.result]
        if self.id is not None:
            values.append(self.id)
        if self.result_type is not None:
            values.append(self.result_type)
        return values


def enrich_samples(document: SampleDocument, *, extended_fields: bool) -> list[EnrichedPatient]:
    """Resolve each sample's profile name from `included` ("Unknown" when missing)."""
    out: list[EnrichedPatient] = []
    for item in document.data:
        profile_id = item.relationships.profile.data.id
        profile = next((p for p in document.included if p.id == profile_id), None)
        attrs = item.attributes
        extra = {"result_type": attrs.result_type, "id": item.id} if extended_fields else {}
        out.append(
            EnrichedPatient(
                name=profile.attributes.name if profile else UNKNOWN_PATIENT_NAME,
                sample_id=attrs.sample_id,
                activate_time=attrs.activate_time,
                result_time=attrs.result_time,
                result=attrs.result,
                **extra,
            )
        )
    return out

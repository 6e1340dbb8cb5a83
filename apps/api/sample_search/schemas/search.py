from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models use camelCase keys; Python code uses snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Serialize as sent over the wire: camelCase keys, unset optional keys omitted."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class SearchParams(CamelModel):
    """Query parameters accepted by GET /org/{org_id}/sample. All optional; empty strings count as absent."""
    page: Optional[str] = None
    patient_name: Optional[str] = None
    sample_barcode: Optional[str] = None
    activation_date: Optional[str] = None
    result_date: Optional[str] = None
    patient_id: Optional[str] = None


class SampleAttributes(CamelModel):
    result: str
    sample_id: str
    activate_time: str
    result_time: str
    # Only set for organisations with extended fields
    result_type: Optional[str] = None
    patient_id: Optional[str] = None


class ResourceIdentifier(CamelModel):
    type: str
    id: str


class ProfileRelationship(CamelModel):
    data: ResourceIdentifier


class SampleRelationships(CamelModel):
    profile: ProfileRelationship


class SampleView(CamelModel):
    id: str
    type: Literal["sample"]
    attributes: SampleAttributes
    relationships: SampleRelationships


class ProfileAttributes(CamelModel):
    name: str


class ProfileResource(CamelModel):
    type: Literal["profile"]
    id: str
    attributes: ProfileAttributes


class SearchMeta(CamelModel):
    total: int
    current_page: Optional[int] = None
    total_pages: Optional[int] = None
    current_page_items: Optional[int] = None


class SearchResponse(CamelModel):
    meta: SearchMeta
    data: list[SampleView]
    included: Optional[list[ProfileResource]] = None

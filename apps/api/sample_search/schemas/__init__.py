"""Pydantic request/response schemas."""

from sample_search.schemas.search import (
    CamelModel,
    SearchParams,
    SampleAttributes,
    ResourceIdentifier,
    ProfileRelationship,
    SampleRelationships,
    SampleView,
    ProfileAttributes,
    ProfileResource,
    SearchMeta,
    SearchResponse,
)
from sample_search.schemas.organisation import (
    OrganisationAttributes,
    OrganisationResource,
    OrganisationListResponse,
)

__all__ = [
    "CamelModel",
    "SearchParams",
    "SampleAttributes",
    "ResourceIdentifier",
    "ProfileRelationship",
    "SampleRelationships",
    "SampleView",
    "ProfileAttributes",
    "ProfileResource",
    "SearchMeta",
    "SearchResponse",
    "OrganisationAttributes",
    "OrganisationResource",
    "OrganisationListResponse",
]

from typing import Literal

from sample_search.schemas.search import CamelModel


class OrganisationAttributes(CamelModel):
    name: str


class OrganisationResource(CamelModel):
    id: str
    type: Literal["organisation"]
    attributes: OrganisationAttributes


class OrganisationListResponse(CamelModel):
    data: list[OrganisationResource]

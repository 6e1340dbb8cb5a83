from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sample_search.core.constants import ORGANISATION_RESOURCE_TYPE
from sample_search.db.models import Organisation
from sample_search.schemas import (
    OrganisationAttributes,
    OrganisationListResponse,
    OrganisationResource,
)


def organisation_to_resource(org: Organisation) -> OrganisationResource:
    return OrganisationResource(
        id=str(org.id),
        type=ORGANISATION_RESOURCE_TYPE,
        attributes=OrganisationAttributes(name=org.name),
    )


class OrganisationService:
    @staticmethod
    async def list_organisations(db: AsyncSession) -> OrganisationListResponse:
        result = await db.execute(select(Organisation).order_by(Organisation.name.asc()))
        orgs = result.scalars().all()
        return OrganisationListResponse(data=[organisation_to_resource(o) for o in orgs])

    @staticmethod
    async def get_organisation(db: AsyncSession, organisation_id: str) -> Organisation | None:
        result = await db.execute(select(Organisation).where(Organisation.id == organisation_id))
        return result.scalar_one_or_none()


organisation_service = OrganisationService()

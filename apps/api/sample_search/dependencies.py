import uuid
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sample_search.db.session import async_session
from sample_search.db.models import Organisation
from sample_search.schemas import SearchParams
from sample_search.services.organisation import organisation_service
from sample_search.services.search import QueryExecutor, SqlAlchemyQueryExecutor


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_organisation_or_404(
    org_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Organisation:
    """Load organisation by path param org_id or raise 404."""
    try:
        uuid.UUID(org_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Organisation not found")
    org = await organisation_service.get_organisation(db, org_id)
    if not org:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Organisation not found")
    return org


async def get_query_executor(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> QueryExecutor:
    return SqlAlchemyQueryExecutor(db)


async def get_search_params(
    page: str | None = Query(None),
    patient_name: str | None = Query(None, alias="patientName"),
    sample_barcode: str | None = Query(None, alias="sampleBarcode"),
    activation_date: str | None = Query(None, alias="activationDate"),
    result_date: str | None = Query(None, alias="resultDate"),
    patient_id: str | None = Query(None, alias="patientId"),
) -> SearchParams:
    return SearchParams(
        page=page,
        patient_name=patient_name,
        sample_barcode=sample_barcode,
        activation_date=activation_date,
        result_date=result_date,
        patient_id=patient_id,
    )

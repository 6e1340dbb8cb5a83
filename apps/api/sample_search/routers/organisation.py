from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from sample_search.core import get_settings, limiter
from sample_search.db.models import Organisation
from sample_search.dependencies import (
    get_db,
    get_organisation_or_404,
    get_query_executor,
    get_search_params,
)
from sample_search.schemas import OrganisationListResponse, SearchParams, SearchResponse
from sample_search.services.organisation import organisation_service
from sample_search.services.search import QueryExecutor, SearchParamError, search_service

router = APIRouter(tags=["organisation"])


@router.get("/org", response_model=OrganisationListResponse)
async def list_organisations(
    db: AsyncSession = Depends(get_db),
):
    return await organisation_service.list_organisations(db)


@router.get(
    "/org/{org_id}/sample",
    response_model=SearchResponse,
    response_model_exclude_unset=True,
)
@limiter.limit(lambda: get_settings().search_rate_limit)
async def search_samples(
    request: Request,
    organisation: Organisation = Depends(get_organisation_or_404),
    params: SearchParams = Depends(get_search_params),
    executor: QueryExecutor = Depends(get_query_executor),
):
    try:
        return await search_service.search(executor, organisation, params)
    except SearchParamError as e:
        raise HTTPException(status_code=400, detail=e.message)

"""
Shared fixtures for the sample search tests.

Rows and organisations are plain objects with the ORM attribute names, and
the query executor is an AsyncMock, so no database is needed. Router tests
run the FastAPI app in-memory through httpx.AsyncClient + ASGITransport.
"""

from types import SimpleNamespace
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from sample_search.services.search import QueryExecutor

CIRCLE_ORG_ID = "b613f220-b31d-461f-ab42-3b974283ab76"
OTHER_ORG_ID = "4f1e1a5c-8f0a-4a4e-9a51-2a0c2f6b9d10"


def make_row(
    result_id: str = "result-1",
    *,
    result: str = "positive",
    sample_id: str = "sample-123",
    type: str = "rtpcr",
    activate_time: str = "2023-01-01",
    result_time: str = "2023-01-02",
    profile_id: str = "profile-1",
    profile_name: str = "John Doe",
) -> SimpleNamespace:
    """A joined Result row with its profile loaded."""
    return SimpleNamespace(
        id=result_id,
        result=result,
        sample_id=sample_id,
        type=type,
        activate_time=activate_time,
        result_time=result_time,
        profile=SimpleNamespace(id=profile_id, name=profile_name),
    )


@pytest.fixture
def circle_org():
    return SimpleNamespace(id=CIRCLE_ORG_ID, name="Circle")


@pytest.fixture
def other_org():
    return SimpleNamespace(id=OTHER_ORG_ID, name="Test Org")


@pytest.fixture
def executor():
    """QueryExecutor double; tests set count/fetch_page/fetch_all return values."""
    ex = AsyncMock(spec=QueryExecutor)
    ex.count.return_value = 0
    ex.fetch_page.return_value = []
    ex.fetch_all.return_value = []
    return ex


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """In-memory client for the FastAPI app; dependency overrides are cleared afterwards."""
    from sample_search.core import limiter
    from sample_search.main import app

    limiter.reset()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()

"""
Executor tests against a real database.

A file-backed SQLite database (aiosqlite) is created per test from the ORM
metadata and seeded with two organisations, so the joins, the date-only
equality, ordering and offset/limit run as SQL rather than as compiled text.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from sample_search.db import Base
from sample_search.db.models import Organisation, Profile, Result
from sample_search.schemas import SearchParams
from sample_search.services.search import (
    InvalidPatientIdError,
    SqlAlchemyQueryExecutor,
    build_sample_query,
    run_search,
)

from conftest import CIRCLE_ORG_ID, OTHER_ORG_ID

pytestmark = pytest.mark.asyncio

PETER_ID = "0d7e4a4c-1b2f-4c3d-8e9f-112233445566"
BRUCE_ID = "5a6b7c8d-9e0f-4a1b-8c2d-3e4f5a6b7c8d"
OUTSIDER_ID = "9f8e7d6c-5b4a-4392-8170-6f5e4d3c2b1a"


def _result(n: int, profile_id: str, day: str, minute: int) -> Result:
    return Result(
        id=f"00000000-0000-4000-8000-{n:012d}",
        profile_id=profile_id,
        result="negative" if n % 2 else "positive",
        sample_id=f"{1000000000 + n}",
        type="rtpcr",
        activate_time=f"{day} 09:{minute:02d}:00",
        result_time=f"{day} 18:{minute:02d}:00",
    )


@pytest_asyncio.fixture
async def db(tmp_path) -> AsyncGenerator[AsyncSession, None]:
    """Seeded session: Circle has 10 results for Peter on 2021-07-12 and 7 for
    Bruce on 2021-07-13; the other organisation has 3 on 2021-07-12."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'samples.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        session.add_all([
            Organisation(id=CIRCLE_ORG_ID, name="Circle"),
            Organisation(id=OTHER_ORG_ID, name="Prenetics"),
        ])
        session.add_all([
            Profile(id=PETER_ID, organisation_id=CIRCLE_ORG_ID, name="Peter Chan"),
            Profile(id=BRUCE_ID, organisation_id=CIRCLE_ORG_ID, name="Bruce Lee"),
            Profile(id=OUTSIDER_ID, organisation_id=OTHER_ORG_ID, name="Jane Doe"),
        ])
        session.add_all(
            [_result(i, PETER_ID, "2021-07-12", i) for i in range(10)]
            + [_result(10 + i, BRUCE_ID, "2021-07-13", i) for i in range(7)]
            + [_result(20 + i, OUTSIDER_ID, "2021-07-12", i) for i in range(3)]
        )
        await session.commit()

    async with session_factory() as session:
        yield session
    await engine.dispose()


async def test_count_is_scoped_to_organisation(db):
    executor = SqlAlchemyQueryExecutor(db)

    assert await executor.count(build_sample_query(CIRCLE_ORG_ID, SearchParams())) == 17
    assert await executor.count(build_sample_query(OTHER_ORG_ID, SearchParams())) == 3


async def test_activation_date_matches_calendar_day(db):
    executor = SqlAlchemyQueryExecutor(db)
    query = build_sample_query(CIRCLE_ORG_ID, SearchParams(activation_date="2021-07-12"))

    rows = await executor.fetch_all(query)

    assert len(rows) == 10
    assert await executor.count(query) == 10
    assert {r.profile.name for r in rows} == {"Peter Chan"}
    assert all(r.activate_time.startswith("2021-07-12") for r in rows)


async def test_result_date_with_no_matches(db):
    executor = SqlAlchemyQueryExecutor(db)
    query = build_sample_query(CIRCLE_ORG_ID, SearchParams(result_date="2021-07-14"))

    assert await executor.fetch_all(query) == []
    assert await executor.count(query) == 0


async def test_fetch_page_orders_by_activation_time(db):
    executor = SqlAlchemyQueryExecutor(db)
    query = build_sample_query(CIRCLE_ORG_ID, SearchParams())

    first = await executor.fetch_page(query, 0, 15)
    last = await executor.fetch_page(query, 15, 15)

    assert len(first) == 15
    assert [r.sample_id for r in last] == ["1000000015", "1000000016"]
    times = [r.activate_time for r in first + last]
    assert times == sorted(times)
    assert {r.profile.name for r in last} == {"Bruce Lee"}


async def test_patient_id_and_name_filters(db):
    executor = SqlAlchemyQueryExecutor(db)

    by_id = await executor.fetch_all(build_sample_query(CIRCLE_ORG_ID, SearchParams(patient_id=BRUCE_ID)))
    by_name = await executor.fetch_all(build_sample_query(CIRCLE_ORG_ID, SearchParams(patient_name="chan")))
    other_org = await executor.fetch_all(build_sample_query(OTHER_ORG_ID, SearchParams(patient_id=BRUCE_ID)))

    assert len(by_id) == 7
    assert {r.profile.id for r in by_id} == {BRUCE_ID}
    assert len(by_name) == 10
    assert other_org == []


async def test_paginated_search_end_to_end(db, circle_org):
    resp = await run_search(SqlAlchemyQueryExecutor(db), circle_org, SearchParams(page="2"))

    doc = resp.to_document()
    assert doc["meta"] == {"total": 17, "currentPage": 2, "totalPages": 2, "currentPageItems": 2}
    assert [d["attributes"]["patientId"] for d in doc["data"]] == [BRUCE_ID, BRUCE_ID]
    assert doc["data"][0]["attributes"]["activateTime"] == "2021-07-13 09:05:00"


async def test_non_uuid_patient_id_never_reaches_the_database(db, circle_org):
    with pytest.raises(InvalidPatientIdError):
        await run_search(SqlAlchemyQueryExecutor(db), circle_org, SearchParams(patient_id="852"))

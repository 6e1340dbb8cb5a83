from abc import ABC, abstractmethod
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from sample_search.db.models import Result
from .filters import SampleQuery


class QueryExecutor(ABC):
    """Runs a pre-scoped SampleQuery. Errors propagate to the caller unchanged."""

    @abstractmethod
    async def count(self, query: SampleQuery) -> int:
        pass

    @abstractmethod
    async def fetch_page(self, query: SampleQuery, offset: int, limit: int) -> Sequence[Result]:
        pass

    @abstractmethod
    async def fetch_all(self, query: SampleQuery) -> Sequence[Result]:
        pass


class SqlAlchemyQueryExecutor(QueryExecutor):
    """QueryExecutor backed by an AsyncSession. Rows come back with `profile` loaded from the join."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _rows_statement(self, query: SampleQuery):
        return query.rows_statement().options(contains_eager(Result.profile))

    async def count(self, query: SampleQuery) -> int:
        result = await self.db.execute(query.count_statement())
        return int(result.scalar_one())

    async def fetch_page(self, query: SampleQuery, offset: int, limit: int) -> Sequence[Result]:
        stmt = self._rows_statement(query).offset(offset).limit(limit)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def fetch_all(self, query: SampleQuery) -> Sequence[Result]:
        result = await self.db.execute(self._rows_statement(query))
        return result.scalars().all()

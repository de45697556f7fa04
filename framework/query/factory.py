"""
Session-bound statement builder and executor.
"""

from typing import Any, List, Optional, Type
from sqlalchemy import delete, update
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession


class QueryFactory:
    """Builds statements and runs them on the session it was created with.

    The factory never commits or rolls back; the owner of the session decides
    where the transaction ends.
    """

    def __init__(self, session: AsyncSession):
        if session is None:
            raise ValueError("QueryFactory needs a session")
        self.session = session

    def select(self, *entities: Any):
        """SELECT of one or more models/columns."""
        return select(*entities)

    def select_from(self, model: Type[SQLModel]):
        """SELECT of every column of `model`."""
        return select(model)

    def update(self, model: Type[SQLModel]):
        """Bulk UPDATE on `model`; chain .where() and .values()."""
        return update(model)

    def delete(self, model: Type[SQLModel]):
        """Bulk DELETE on `model`; chain .where()."""
        return delete(model)

    async def fetch(self, statement) -> List[Any]:
        """Run a SELECT and return every row."""
        result = await self.session.exec(statement)
        return list(result.all())

    async def fetch_one(self, statement) -> Optional[Any]:
        """Run a SELECT and return the first row, or None."""
        result = await self.session.exec(statement)
        return result.first()

    async def fetch_count(self, model: Type[SQLModel], *where) -> int:
        statement = select(func.count()).select_from(model)
        for clause in where:
            statement = statement.where(clause)
        result = await self.session.exec(statement)
        return result.one()

    async def execute(self, statement) -> int:
        """Run a bulk UPDATE/DELETE and return the affected row count."""
        result = await self.session.exec(statement)
        return result.rowcount


def create_query_factory(session: AsyncSession) -> QueryFactory:
    """New helper per call; the session is always passed in explicitly."""
    return QueryFactory(session)

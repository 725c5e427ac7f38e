"""PostgreSQL unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from comicraft.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work backed by a savepoint on the request session.

    The request session commits when the request ends; a savepoint lets a
    failed compound write be undone without discarding the whole request.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield

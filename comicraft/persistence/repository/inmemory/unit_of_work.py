"""In-memory unit of work for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from comicraft.domain.repository import UnitOfWork

from .base import Snapshottable


class InMemoryUnitOfWork(UnitOfWork):
    """Serializes compound writes and restores repository state on failure.

    Holding the lock for the whole block gives the same all-or-nothing
    outcome to concurrent callers that a database transaction would.
    """

    def __init__(self, *repositories: Snapshottable) -> None:
        self._repositories = repositories
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            snapshots = [repo.snapshot() for repo in self._repositories]
            try:
                yield
            except BaseException:
                for repo, rows in zip(self._repositories, snapshots):
                    repo.restore(rows)
                raise

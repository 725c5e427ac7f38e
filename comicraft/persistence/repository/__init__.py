"""PostgreSQL repository implementations."""

from comicraft.persistence.repository.community import PostgresCommunityRepository
from comicraft.persistence.repository.post import PostgresPostRepository
from comicraft.persistence.repository.snippet import PostgresSnippetRepository
from comicraft.persistence.repository.unit_of_work import PostgresUnitOfWork
from comicraft.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommunityRepository",
    "PostgresSnippetRepository",
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresUnitOfWork",
]

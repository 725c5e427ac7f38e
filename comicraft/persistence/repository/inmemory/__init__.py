"""In-memory repository implementations for testing."""

from .community import InMemoryCommunityRepository
from .post import InMemoryPostRepository
from .snippet import InMemorySnippetRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommunityRepository",
    "InMemoryPostRepository",
    "InMemorySnippetRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]

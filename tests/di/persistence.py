"""Mock persistence providers for testing."""

from dishka import Scope, provide

from comicraft.domain.repository import (
    CommunityRepository,
    PostRepository,
    SnippetRepository,
    UnitOfWork,
    VoteRepository,
)
from comicraft.persistence.repository.inmemory import (
    InMemoryCommunityRepository,
    InMemoryPostRepository,
    InMemorySnippetRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from comicraft.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that data outlives a single request
    (needed by the API tests). Each test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_inmemory_community_repository(self) -> InMemoryCommunityRepository:
        return InMemoryCommunityRepository()

    @provide
    def get_inmemory_snippet_repository(self) -> InMemorySnippetRepository:
        return InMemorySnippetRepository()

    @provide
    def get_inmemory_post_repository(self) -> InMemoryPostRepository:
        return InMemoryPostRepository()

    @provide
    def get_inmemory_vote_repository(self) -> InMemoryVoteRepository:
        return InMemoryVoteRepository()

    @provide
    def get_community_repository(
        self, repository: InMemoryCommunityRepository
    ) -> CommunityRepository:
        """Provide in-memory community repository."""
        return repository

    @provide
    def get_snippet_repository(
        self, repository: InMemorySnippetRepository
    ) -> SnippetRepository:
        """Provide in-memory snippet repository."""
        return repository

    @provide
    def get_post_repository(self, repository: InMemoryPostRepository) -> PostRepository:
        """Provide in-memory post repository."""
        return repository

    @provide
    def get_vote_repository(self, repository: InMemoryVoteRepository) -> VoteRepository:
        """Provide in-memory vote repository."""
        return repository

    @provide
    def get_unit_of_work(
        self,
        communities: InMemoryCommunityRepository,
        snippets: InMemorySnippetRepository,
        posts: InMemoryPostRepository,
        votes: InMemoryVoteRepository,
    ) -> UnitOfWork:
        """Provide unit of work spanning all in-memory repositories."""
        return InMemoryUnitOfWork(communities, snippets, posts, votes)

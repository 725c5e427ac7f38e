"""Domain layer DI providers."""

from dishka import Scope, provide

from comicraft.config import AuthSettings
from comicraft.domain.repository import (
    CommunityRepository,
    PostRepository,
    SnippetRepository,
    UnitOfWork,
    VoteRepository,
)
from comicraft.domain.service import (
    CommunityService,
    ImageStorage,
    JWTService,
    MembershipService,
    PostService,
    VoteService,
)
from comicraft.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_community_service(
        self,
        community_repository: CommunityRepository,
        snippet_repository: SnippetRepository,
        unit_of_work: UnitOfWork,
        image_storage: ImageStorage,
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(
            community_repository=community_repository,
            snippet_repository=snippet_repository,
            unit_of_work=unit_of_work,
            image_storage=image_storage,
        )

    @provide
    def get_membership_service(
        self,
        community_repository: CommunityRepository,
        snippet_repository: SnippetRepository,
        unit_of_work: UnitOfWork,
    ) -> MembershipService:
        """Provide membership domain service."""
        return MembershipService(
            community_repository=community_repository,
            snippet_repository=snippet_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        vote_repository: VoteRepository,
        community_repository: CommunityRepository,
        snippet_repository: SnippetRepository,
        unit_of_work: UnitOfWork,
        image_storage: ImageStorage,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            vote_repository=vote_repository,
            community_repository=community_repository,
            snippet_repository=snippet_repository,
            unit_of_work=unit_of_work,
            image_storage=image_storage,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        unit_of_work: UnitOfWork,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_repository=post_repository,
            unit_of_work=unit_of_work,
        )

"""Application layer DI providers."""

from dishka import Scope, provide

from comicraft.application.state import Store
from comicraft.application.usecase.community import (
    CreateCommunityUseCase,
    GetCommunityUseCase,
    JoinCommunityUseCase,
    JoinOrLeaveCommunityUseCase,
    LeaveCommunityUseCase,
    ListSnippetsUseCase,
    ListTopCommunitiesUseCase,
    UpdateCommunityImageUseCase,
)
from comicraft.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from comicraft.application.usecase.vote import ListVotesUseCase, VotePostUseCase
from comicraft.domain.repository import PostRepository, VoteRepository
from comicraft.domain.service import (
    CommunityService,
    MembershipService,
    PostService,
    VoteService,
)
from comicraft.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Community use cases
    @provide
    def get_create_community_use_case(
        self, community_service: CommunityService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(community_service=community_service)

    @provide
    def get_get_community_use_case(
        self,
        community_service: CommunityService,
        membership_service: MembershipService,
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(
            community_service=community_service,
            membership_service=membership_service,
        )

    @provide
    def get_list_top_communities_use_case(
        self, community_service: CommunityService
    ) -> ListTopCommunitiesUseCase:
        """Provide list top communities use case."""
        return ListTopCommunitiesUseCase(community_service=community_service)

    @provide
    def get_update_community_image_use_case(
        self, community_service: CommunityService
    ) -> UpdateCommunityImageUseCase:
        """Provide update community image use case."""
        return UpdateCommunityImageUseCase(community_service=community_service)

    # Membership use cases
    @provide
    def get_join_community_use_case(
        self,
        membership_service: MembershipService,
        community_service: CommunityService,
    ) -> JoinCommunityUseCase:
        """Provide join community use case."""
        return JoinCommunityUseCase(
            membership_service=membership_service,
            community_service=community_service,
        )

    @provide
    def get_leave_community_use_case(
        self,
        membership_service: MembershipService,
        community_service: CommunityService,
    ) -> LeaveCommunityUseCase:
        """Provide leave community use case."""
        return LeaveCommunityUseCase(
            membership_service=membership_service,
            community_service=community_service,
        )

    @provide
    def get_join_or_leave_community_use_case(
        self,
        membership_service: MembershipService,
        community_service: CommunityService,
    ) -> JoinOrLeaveCommunityUseCase:
        """Provide membership toggle use case."""
        return JoinOrLeaveCommunityUseCase(
            membership_service=membership_service,
            community_service=community_service,
        )

    @provide
    def get_list_snippets_use_case(
        self, membership_service: MembershipService
    ) -> ListSnippetsUseCase:
        """Provide list snippets use case."""
        return ListSnippetsUseCase(membership_service=membership_service)

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(
        self, post_repository: PostRepository, vote_repository: VoteRepository
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_repository=post_repository, vote_repository=vote_repository
        )

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Vote use cases
    @provide
    def get_vote_post_use_case(self, vote_service: VoteService) -> VotePostUseCase:
        """Provide vote use case."""
        return VotePostUseCase(vote_service=vote_service)

    @provide
    def get_list_votes_use_case(self, vote_service: VoteService) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(vote_service=vote_service)

    # State store (one per request, driving the use cases above)
    @provide
    def get_store(
        self,
        list_snippets: ListSnippetsUseCase,
        get_community: GetCommunityUseCase,
        join_community: JoinCommunityUseCase,
        leave_community: LeaveCommunityUseCase,
        create_community: CreateCommunityUseCase,
        create_post: CreatePostUseCase,
        delete_post: DeletePostUseCase,
        list_posts: ListPostsUseCase,
        vote_post: VotePostUseCase,
        list_votes: ListVotesUseCase,
    ) -> Store:
        """Provide application state store."""
        return Store(
            list_snippets=list_snippets,
            get_community=get_community,
            join_community=join_community,
            leave_community=leave_community,
            create_community=create_community,
            create_post=create_post,
            delete_post=delete_post,
            list_posts=list_posts,
            vote_post=vote_post,
            list_votes=list_votes,
        )

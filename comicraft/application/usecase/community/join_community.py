"""Join community use case."""

from pydantic import BaseModel

from comicraft.domain.service import CommunityService, MembershipService
from comicraft.domain.value import CommunityId, CurrentUser

from .common import CommunityItem, SnippetItem


class JoinCommunityRequest(BaseModel):
    """Join community request."""

    community_id: str
    user: CurrentUser


class JoinCommunityResponse(BaseModel):
    """Join community response."""

    snippet: SnippetItem
    community: CommunityItem  # With the updated member count


class JoinCommunityUseCase:
    """Use case for joining a community."""

    def __init__(
        self,
        membership_service: MembershipService,
        community_service: CommunityService,
    ) -> None:
        """Initialize join community use case.

        Args:
            membership_service: Membership domain service
            community_service: Community domain service
        """
        self.membership_service = membership_service
        self.community_service = community_service

    async def execute(self, request: JoinCommunityRequest) -> JoinCommunityResponse:
        """Execute join flow.

        Raises:
            NotFoundError: If the community doesn't exist
            AlreadyMemberError: If the user is already a member
        """
        community_id = CommunityId(request.community_id)
        snippet = await self.membership_service.join(community_id, request.user)
        community = await self.community_service.get_community(community_id)

        return JoinCommunityResponse(
            snippet=SnippetItem.from_domain(snippet),
            community=CommunityItem.from_domain(community),
        )

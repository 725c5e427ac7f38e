"""Toggle community membership use case."""

from pydantic import BaseModel

from comicraft.domain.service import CommunityService, MembershipService
from comicraft.domain.value import CommunityId, CurrentUser

from .common import CommunityItem, SnippetItem


class JoinOrLeaveCommunityRequest(BaseModel):
    """Toggle membership request.

    ``is_joined`` is the caller's current view of the membership: True
    leaves the community, False joins it.
    """

    community_id: str
    is_joined: bool
    user: CurrentUser


class JoinOrLeaveCommunityResponse(BaseModel):
    """Toggle membership response."""

    is_joined: bool  # Membership after the toggle
    snippet: SnippetItem | None
    community: CommunityItem | None


class JoinOrLeaveCommunityUseCase:
    """Use case for the join/leave button."""

    def __init__(
        self,
        membership_service: MembershipService,
        community_service: CommunityService,
    ) -> None:
        self.membership_service = membership_service
        self.community_service = community_service

    async def execute(
        self, request: JoinOrLeaveCommunityRequest
    ) -> JoinOrLeaveCommunityResponse:
        community_id = CommunityId(request.community_id)
        snippet = await self.membership_service.join_or_leave(
            community_id, request.user, request.is_joined
        )
        community = await self.community_service.find_community(community_id)

        return JoinOrLeaveCommunityResponse(
            is_joined=snippet is not None,
            snippet=SnippetItem.from_domain(snippet) if snippet else None,
            community=CommunityItem.from_domain(community) if community else None,
        )

"""Leave community use case."""

from pydantic import BaseModel

from comicraft.domain.service import CommunityService, MembershipService
from comicraft.domain.value import CommunityId, CurrentUser

from .common import CommunityItem


class LeaveCommunityRequest(BaseModel):
    """Leave community request."""

    community_id: str
    user: CurrentUser


class LeaveCommunityResponse(BaseModel):
    """Leave community response."""

    community_id: str
    community: CommunityItem | None  # With the updated member count


class LeaveCommunityUseCase:
    """Use case for leaving a community."""

    def __init__(
        self,
        membership_service: MembershipService,
        community_service: CommunityService,
    ) -> None:
        self.membership_service = membership_service
        self.community_service = community_service

    async def execute(self, request: LeaveCommunityRequest) -> LeaveCommunityResponse:
        """Execute leave flow.

        Raises:
            NotMemberError: If the user is not a member
        """
        community_id = CommunityId(request.community_id)
        await self.membership_service.leave(community_id, request.user)
        community = await self.community_service.find_community(community_id)

        return LeaveCommunityResponse(
            community_id=community_id,
            community=CommunityItem.from_domain(community) if community else None,
        )

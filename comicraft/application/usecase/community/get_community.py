"""Get community use case."""

from typing import Optional

from pydantic import BaseModel

from comicraft.domain.service import CommunityService, MembershipService
from comicraft.domain.value import CommunityId, UserId

from .common import CommunityItem


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommunityResponse(BaseModel):
    """Get community response."""

    community: CommunityItem
    is_member: bool


class GetCommunityUseCase:
    """Use case for retrieving a community by ID."""

    def __init__(
        self,
        community_service: CommunityService,
        membership_service: MembershipService,
    ) -> None:
        """Initialize get community use case.

        Args:
            community_service: Community domain service
            membership_service: Membership domain service
        """
        self.community_service = community_service
        self.membership_service = membership_service

    async def execute(self, request: GetCommunityRequest) -> Optional[GetCommunityResponse]:
        """Execute get community flow.

        Returns:
            Community details if found, None otherwise
        """
        community_id = CommunityId(request.community_id)
        community = await self.community_service.find_community(community_id)
        if not community:
            return None

        is_member = False
        if request.user_id:
            is_member = await self.membership_service.is_member(
                UserId(request.user_id), community_id
            )

        return GetCommunityResponse(
            community=CommunityItem.from_domain(community),
            is_member=is_member,
        )

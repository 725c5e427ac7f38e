"""List top communities use case."""

from pydantic import BaseModel, Field

from comicraft.domain.service import CommunityService

from .common import CommunityItem


class ListTopCommunitiesRequest(BaseModel):
    """List top communities request."""

    limit: int = Field(default=5, ge=1, le=100)


class ListTopCommunitiesResponse(BaseModel):
    """List top communities response."""

    communities: list[CommunityItem]


class ListTopCommunitiesUseCase:
    """Use case for listing the communities with the most members."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(
        self, request: ListTopCommunitiesRequest
    ) -> ListTopCommunitiesResponse:
        communities = await self.community_service.list_top_communities(request.limit)
        return ListTopCommunitiesResponse(
            communities=[CommunityItem.from_domain(c) for c in communities]
        )

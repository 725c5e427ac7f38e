"""List the current user's votes in a community."""

from pydantic import BaseModel

from comicraft.domain.service import VoteService
from comicraft.domain.value import CommunityId, UserId


class VoteItem(BaseModel):
    """Vote in responses."""

    vote_id: str
    post_id: str
    community_id: str
    vote_value: int


class ListVotesRequest(BaseModel):
    """List votes request."""

    community_id: str
    user_id: str


class ListVotesResponse(BaseModel):
    """List votes response."""

    votes: list[VoteItem]


class ListVotesUseCase:
    """Use case for fetching a user's votes on a community's posts."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        votes = await self.vote_service.list_user_votes(
            UserId(request.user_id), CommunityId(request.community_id)
        )
        return ListVotesResponse(
            votes=[
                VoteItem(
                    vote_id=str(v.id),
                    post_id=str(v.post_id),
                    community_id=v.community_id,
                    vote_value=int(v.vote_value),
                )
                for v in votes
            ]
        )
